"""Configuration models and loaders for podlocate."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, PLATFORM_ENV_VAR, dump_example_config, load_config
from .models import LocatorSettings, PlatformProfile, RuntimeSettings, XcconfigSettings

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "LocatorSettings",
    "PLATFORM_ENV_VAR",
    "PlatformProfile",
    "RuntimeSettings",
    "XcconfigSettings",
    "dump_example_config",
    "load_config",
]
