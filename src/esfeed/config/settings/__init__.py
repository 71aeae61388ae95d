"""Config settings – 12-factor env-based configuration."""
from esfeed.config.settings.base import ClientSettings, Settings
from esfeed.config.settings.loaders import EnvSettingsLoader, SettingsLoader, env_key

__all__ = ["ClientSettings", "EnvSettingsLoader", "Settings", "SettingsLoader", "env_key"]
