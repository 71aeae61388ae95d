"""Config validation – errors raised while loading ``ESFEED_*`` settings.

Every error names the setting it is about in ``setting_name`` and in
``detail["setting"]``.  The loader adds ``detail["env_key"]`` when a
field-level validation error can be traced back to an environment variable.
"""
from __future__ import annotations

from typing import Any

from esfeed.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""

    default_code = "config_error"

    def __init__(self, message: str, *, setting_name: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.setting_name = setting_name
        if setting_name is not None:
            self.detail.setdefault("setting", setting_name)


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, expected_type: str | None = None) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            setting_name=setting_name,
            detail={"expected_type": expected_type} if expected_type else None,
        )
        self.expected_type = expected_type


class SettingCoercionError(ConfigError):
    """An environment value cannot be read as the field's declared type."""

    default_code = "setting_coercion_error"

    def __init__(
        self,
        setting_name: str,
        raw: str,
        expected_type: str,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            f"Setting '{setting_name}'={raw!r} is not a valid {expected_type}",
            setting_name=setting_name,
            detail={"value": raw, "expected_type": expected_type},
            cause=cause,
        )
        self.raw = raw
        self.expected_type = expected_type


class InvalidSettingValueError(ConfigError):
    """A value has the right type but breaks a rule such as ``page_size >= 1``."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            setting_name=setting_name,
            detail={"value": value, "reason": reason},
        )
        self.value = value
        self.reason = reason


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingCoercionError",
]
