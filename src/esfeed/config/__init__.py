"""Config – 12-factor settings and loaders."""

from esfeed.config.settings import ClientSettings, EnvSettingsLoader, Settings, SettingsLoader, env_key
from esfeed.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingCoercionError,
)

__all__ = [
    "ClientSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingCoercionError",
    "Settings",
    "SettingsLoader",
    "env_key",
]
