import json
import os
import tempfile

from loguru import logger

from vietnamese import is_word_break

CONFIG_DIR = os.path.expanduser("~/.config/ibus-viet")
CONFIG_PATH = os.path.join(CONFIG_DIR, "config.json")

DEFAULT_CONFIG = {
    # Characters that end a word on top of digits and WORD_BREAK_SYMBOLS
    "ExtraWordBreakSymbols": "",
}


def load_config(path=CONFIG_PATH):
    config = dict(DEFAULT_CONFIG)
    if not os.path.exists(path):
        return config
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Error loading config {path}: {e}")
        return config
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {path}: expected a JSON object")
        return config
    for key, value in data.items():
        default = DEFAULT_CONFIG.get(key)
        if default is not None and not isinstance(value, type(default)):
            logger.warning(f"Ignoring {key} in {path}: expected {type(default).__name__}, got {value!r}")
            continue
        config[key] = value
    return config


def save_config(config, path=CONFIG_PATH):
    # Write to a sibling temp file so a failed save never truncates the old config
    tmp_path = None
    try:
        text = json.dumps(config, ensure_ascii=False, indent=2)
        config_dir = os.path.dirname(os.path.abspath(path))
        os.makedirs(config_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=config_dir, prefix=".config-", suffix=".json")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_path, path)
        tmp_path = None
    except (OSError, TypeError, ValueError) as e:
        logger.warning(f"Error saving config {path}: {e}")
        raise
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
    logger.debug(f"Saved config to {path}")


def word_break_checker(config):
    extra = frozenset(config.get("ExtraWordBreakSymbols", ""))

    def check(c):
        return is_word_break(c, extra)

    return check
