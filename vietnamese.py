from enum import IntEnum
from types import MappingProxyType


class Tone(IntEnum):
    NONE = 0
    GRAVE = 1       # huyền
    ACUTE = 2       # sắc
    HOOK_ABOVE = 3  # hỏi
    TILDE = 4       # ngã
    DOT_BELOW = 5   # nặng


class Mark(IntEnum):
    NONE = 0
    HAT = 1    # â ê ô
    BREVE = 2  # ă
    HORN = 3   # ơ ư
    DASH = 4   # đ


# Six entries per shape, one per Tone in enum order
VOWELS = (
    "aàáảãạ" "ăằắẳẵặ" "âầấẩẫậ"
    "eèéẻẽẹ" "êềếểễệ"
    "iìíỉĩị"
    "oòóỏõọ" "ôồốổỗộ" "ơờớởỡợ"
    "uùúủũụ" "ưừứửữự"
    "yỳýỷỹỵ"
)

_VOWEL_POSITIONS = MappingProxyType({c: pos for pos, c in enumerate(VOWELS)})


def _family(slots):
    # '_' marks a shape the family does not have
    return tuple(None if c == "_" else c for c in slots)


_A = _family("aâă__")
_E = _family("eê___")
_O = _family("oô_ơ_")
_U = _family("u__ư_")
_D = _family("d___đ")

MARK_FAMILIES = MappingProxyType({
    "a": _A, "â": _A, "ă": _A,
    "e": _E, "ê": _E,
    "o": _O, "ô": _O, "ơ": _O,
    "u": _U, "ư": _U,
    "d": _D, "đ": _D,
})

# Letters that only exist in Vietnamese, even without a tone
VN_IDENTICAL_CHARSET = frozenset("âăêôơưđ")

WORD_BREAK_SYMBOLS = frozenset(",;:.\"'!? <>=+-*/\\_~`@#$%^&(){}[]|")


# Tone table

def find_vowel_position(c):
    return _VOWEL_POSITIONS.get(c)


def is_vowel(c):
    return c in _VOWEL_POSITIONS


def has_vowel(seq):
    return any(is_vowel(c) for c in seq)


def find_tone(c):
    """Tone carried by ``c``; ``Tone.NONE`` for plain vowels and non-vowels alike."""
    pos = find_vowel_position(c)
    if pos is None:
        return Tone.NONE
    return Tone(pos % 6)


def add_tone(c, tone):
    """Return ``c`` carrying ``tone`` instead of its current one.

    Characters outside the vowel table are returned unchanged.
    """
    tone = Tone(tone)
    pos = find_vowel_position(c)
    if pos is None:
        return c
    return VOWELS[pos // 6 * 6 + tone]


# Mark table

def mark_family(c):
    return MARK_FAMILIES.get(c)


def mark_family_members(c):
    family = mark_family(c)
    if family is None:
        return []
    return [m for m in family if m is not None]


def find_mark_position(c):
    family = mark_family(c)
    if family is None:
        return None
    return Mark(family.index(c))


def plain_form(c):
    family = mark_family(c)
    if family is None:
        return c
    return family[Mark.NONE]


# Character transforms

def find_mark(c):
    """Return ``(mark, found)`` for a tone-neutral character."""
    mark = find_mark_position(c)
    if mark is None:
        return Mark.NONE, False
    return mark, True


def remove_mark(c):
    return plain_form(c)


def add_mark(c, mark):
    """Give ``c`` the shape ``mark`` while keeping its tone.

    ``add_mark("ờ", Mark.HAT)`` is ``"ồ"``. Returns None when the letter has
    no such shape (``add_mark("e", Mark.HORN)``); callers must not render it.
    """
    mark = Mark(mark)
    tone = find_tone(c)
    family = mark_family(add_tone(c, Tone.NONE))
    if family is None or family[mark] is None:
        return None
    return add_tone(family[mark], tone)


def is_alpha(c):
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


# Word classifiers

def is_word_break(c, extra=frozenset()):
    # extra is a set of user symbols, built once by the caller
    if "0" <= c <= "9":
        return True
    return c in WORD_BREAK_SYMBOLS or c in extra


def remove_tone_from_word(word):
    return "".join(add_tone(c, Tone.NONE) if is_vowel(c) else c for c in word)


def has_vietnamese_char(word):
    for c in word.lower():
        if find_tone(c) != Tone.NONE:
            return True
        if add_tone(c, Tone.NONE) in VN_IDENTICAL_CHARSET:
            return True
    return False
