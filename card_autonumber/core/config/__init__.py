"""
Configuration loading.
"""

from .config_loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    AutoNumberConfigLoader,
    load_config,
    resolve_config_path,
)

__all__ = [
    "AutoNumberConfigLoader",
    "load_config",
    "resolve_config_path",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
