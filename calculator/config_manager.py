# config_manager.py
"""""
Loads and saves the calculator settings.

config.json      setting values
ui_strings.json  human readable description of every setting (used by the settings dialog)

Both files live in the project root. Missing keys (or a missing/broken file) fall back to
DEFAULT_SETTINGS, so callers can always index the returned dictionary.
"""""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

config_json = Path(__file__).resolve().parent.parent / "config.json"
ui_strings = Path(__file__).resolve().parent.parent / "ui_strings.json"

DEFAULT_SETTINGS = {
    "darkmode": False,
    "decimal_places": 10,
    "show_steps": True,
    "after_paste_enter": False,
    "history_limit": 100,
    "max_expression_length": 1000,
    "share_base_url": "calculator://open",
    "debug": False,
}


def _read_json(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return None


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    loaded = _read_json(config_json)
    if isinstance(loaded, dict):
        settings_dict.update(loaded)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    settings_dict = _read_json(ui_strings)
    if not isinstance(settings_dict, dict):
        return {}

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (OSError, TypeError) as e:
        logger.error("Could not save settings to %s: %s", config_json, e)
        return {}
