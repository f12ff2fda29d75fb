# Debian-DevEnv-Setup/devenv_setup/config_loader.py

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from devenv_setup import console_output as con
from devenv_setup.config import DEFAULT_CONFIG
from devenv_setup.logger_utils import app_logger


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Returns a deep copy of `base` with `overrides` merged in.
    Nested dicts are merged key by key, any other value replaces the base one.
    """
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_configuration(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads the application configuration.

    The defaults always apply. When `config_file` names an existing JSON file,
    its contents override them. A missing file is not an error; an unreadable
    or malformed one is reported and ignored.
    """
    if not config_file:
        return merge_config(DEFAULT_CONFIG, {})

    config_path = Path(config_file)
    if not config_path.is_file():
        app_logger.info(f"No configuration file at '{config_path}', using built-in defaults.")
        return merge_config(DEFAULT_CONFIG, {})

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            overrides = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        con.print_error(f"Error loading configuration file '{config_file}': {e}")
        app_logger.error(f"Could not load '{config_path}': {e}. Falling back to defaults.")
        return merge_config(DEFAULT_CONFIG, {})

    if not isinstance(overrides, dict):
        con.print_error(f"Configuration file '{config_file}' must contain a JSON object. Using defaults.")
        app_logger.error(f"Top level of '{config_path}' is {type(overrides).__name__}, expected object.")
        return merge_config(DEFAULT_CONFIG, {})

    app_logger.info(f"Loaded configuration overrides from '{config_path}'.")
    return merge_config(DEFAULT_CONFIG, overrides)
