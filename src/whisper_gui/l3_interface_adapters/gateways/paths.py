"""Shared path constants for configuration, preferences, and logs."""

from __future__ import annotations

from platformdirs import user_config_path, user_log_path

APP_NAME = 'whisper-gui'

CONFIG_DIR = user_config_path(APP_NAME)
PREFERENCES_PATH = CONFIG_DIR / 'preferences.yaml'
LOG_DIR = user_log_path(APP_NAME)

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
