# config_manager.py
import json
import logging
from pathlib import Path

from . import error as E

logger = logging.getLogger(__name__)

config_json = Path(__file__).resolve().parent / "config.json"

DEFAULT_SETTINGS = {
    "decimal_places": 10,
    "fractions": False,
    "show_steps": True,
    "debug": False,
}


def load_setting_value(key_value):
    """Return one setting, or every setting for key_value == "all".

    A missing or unreadable config.json falls back to DEFAULT_SETTINGS.
    """
    settings_dict = dict(DEFAULT_SETTINGS)
    try:
        with open(config_json, 'r', encoding='utf-8') as f:
            settings_dict.update(json.load(f))

    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.debug("Using default settings (%s)", e)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError as e:
        raise E.MathError(f"Settings could not be saved: {e}", code="5000", equation=str(config_json))
