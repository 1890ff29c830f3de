"""Client configuration. Zero imports from services or ui.

Stores user preferences and the session token in ~/.finsync/config.json.
The API base URL can be overridden with the FINSYNC_API_URL environment
variable.
"""
import json
import os
from pathlib import Path

from utils.constants import (
    API_URL_ENV_VAR,
    DEFAULT_API_BASE_URL,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_DATE_FORMAT,
)

CONFIG_DIR = Path.home() / ".finsync"
CONFIG_FILE = CONFIG_DIR / "config.json"


def load_config() -> dict:
    """Returns {} on missing or corrupt file; never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict) -> None:
    """Creates ~/.finsync/ if needed; atomic write via .tmp + os.replace()."""
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    tmp = CONFIG_FILE.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, CONFIG_FILE)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def get_setting(key: str, default=None):
    return load_config().get(key, default)


def set_setting(key: str, value) -> None:
    """Update a single key and save. None removes the key."""
    config = load_config()
    if value is None:
        config.pop(key, None)
    else:
        config[key] = value
    save_config(config)


def get_api_base_url() -> str:
    """Environment override first, then config, then the default."""
    url = os.environ.get(API_URL_ENV_VAR) or get_setting("api_base_url") or DEFAULT_API_BASE_URL
    return url.rstrip("/")


def get_date_format() -> str:
    return get_setting("date_format", DEFAULT_DATE_FORMAT)


def get_currency_symbol() -> str:
    return get_setting("currency_symbol", DEFAULT_CURRENCY_SYMBOL)


def get_appearance_mode() -> str:
    return get_setting("appearance_mode", "system")
