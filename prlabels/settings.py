import copy
import logging
import os

import yaml

from prlabels.constants import CONFIG_FILE, DEFAULT_SETTINGS

# Retrieve main logger
logger = logging.getLogger("main")


# Cache variable
_cached_settings = None


def _merge_settings(defaults, overrides):
    merged_settings = copy.deepcopy(defaults)
    for section, values in (overrides or {}).items():
        if isinstance(values, dict) and section in merged_settings and isinstance(merged_settings[section], dict):
            merged_settings[section].update(values)
        else:
            merged_settings[section] = values
    return merged_settings


def _apply_env_overrides(settings):
    database_uri = os.environ.get("PRLABELS_DATABASE_URI")
    if database_uri:
        settings["database"]["uri"] = database_uri

    log_format = os.environ.get("LOG_FORMAT")
    if log_format:
        settings["logging"]["format"] = log_format

    log_level = os.environ.get("LOG_LEVEL")
    if log_level:
        settings["logging"]["level"] = log_level.upper()
    return settings


def load_settings(force=False, config_file=None):
    global _cached_settings

    if _cached_settings and not force:
        return _cached_settings

    config_file = config_file or CONFIG_FILE
    if os.path.exists(config_file):
        logger.debug(f"Reading configuration file: {config_file}")
        with open(config_file, "r") as yaml_file:
            file_settings = yaml.safe_load(yaml_file) or {}
        settings = _merge_settings(DEFAULT_SETTINGS, file_settings)
    else:
        logger.debug(f"Configuration file {config_file} not found, using defaults.")
        settings = copy.deepcopy(DEFAULT_SETTINGS)

    settings = _apply_env_overrides(settings)

    _cached_settings = settings
    return settings


def save_settings(settings, config_file=None):
    config_file = config_file or CONFIG_FILE
    os.makedirs(os.path.dirname(config_file), exist_ok=True)
    with open(config_file, "w") as yaml_file:
        yaml.dump(settings, yaml_file)
    return reload_conf(config_file=config_file)


def reload_conf(config_file=None):
    """Reload application settings cache"""
    global _cached_settings
    _cached_settings = None
    return load_settings(force=True, config_file=config_file)
