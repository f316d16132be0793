import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "csvscope")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "csvscope.log")

# default settings
CHUNK_SIZE_DEFAULT = 10000
FIND_BATCH_SIZE_DEFAULT = 2000
POLL_TIMEOUT_MS_DEFAULT = 100
LOG_LEVEL_DEFAULT = "WARNING"

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    try:
        os.makedirs(CONFIG_DIR, exist_ok=True)
    except OSError:
        pass


def _positive_int(value):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def load_config():
    cfg = {
        "CHUNK_SIZE": CHUNK_SIZE_DEFAULT,
        "FIND_BATCH_SIZE": FIND_BATCH_SIZE_DEFAULT,
        "POLL_TIMEOUT_MS": POLL_TIMEOUT_MS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        logging.getLogger(__name__).warning("ignoring unreadable config %s", CONFIG_JSON)
        return cfg

    if not isinstance(data, dict):
        return cfg

    for key, cfg_key in (
        ("chunk_size", "CHUNK_SIZE"),
        ("find_batch_size", "FIND_BATCH_SIZE"),
        ("poll_timeout_ms", "POLL_TIMEOUT_MS"),
    ):
        value = _positive_int(data.get(key))
        if value is not None:
            cfg[cfg_key] = value

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    return cfg
