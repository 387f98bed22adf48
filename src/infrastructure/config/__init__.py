"""
Configuration module.

Punto único de configuración: settings.py.
"""

from src.infrastructure.config.settings import (
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
    settings,
)


__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "reload_settings",
    "find_env_file",
    "ENV_FILE_PATH",
]
