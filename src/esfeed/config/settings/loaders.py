"""Config settings – SettingsLoader, EnvSettingsLoader.

Each dataclass field is read from ``{PREFIX}_{FIELD}``; for
:class:`ClientSettings` that is ``ESFEED_BASE_URL``, ``ESFEED_PAGE_SIZE`` and
so on.  Values are coerced by the field's annotation.  An optional field
(``str | None``) set to the empty string loads as ``None``.
"""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Callable, Mapping, TypeVar

from esfeed.config.settings.base import Settings
from esfeed.config.validation import ConfigError, MissingRequiredSettingError, SettingCoercionError

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"expected one of {sorted(_TRUTHY | _FALSY)}")


_COERCERS: dict[str, Callable[[str], Any]] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": _parse_bool,
}


def env_key(prefix: str, field_name: str) -> str:
    """``env_key("ESFEED", "page_size")`` → ``"ESFEED_PAGE_SIZE"``."""
    return f"{prefix}_{field_name}".upper().lstrip("_")


def _split_hint(hint: Any) -> tuple[str, bool]:
    # field.type is a string under postponed annotations, e.g. "str | None"
    text = hint if isinstance(hint, str) else getattr(hint, "__name__", str(hint))
    members = [member.strip() for member in text.split("|")]
    names = [member for member in members if member != "None"]
    return (names[0] if len(names) == 1 else text), len(names) < len(members)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables.

    Args:
        environ: Mapping read instead of :data:`os.environ`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        """Build *settings_class* from the environment.

        Raises:
            MissingRequiredSettingError: a field without default has no variable.
            SettingCoercionError: a variable does not parse as its field's type.
            InvalidSettingValueError: the loaded values break a settings rule.
        """
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "")
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(prefix, field.name)
            raw = environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key, expected_type=_split_hint(field.type)[0])
                continue
            kwargs[field.name] = self.coerce(key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError as exc:
            if exc.setting_name is not None:
                exc.detail.setdefault("env_key", env_key(prefix, exc.setting_name))
            raise

    def coerce(self, key: str, raw: str, type_hint: Any) -> Any:
        type_name, optional = _split_hint(type_hint)
        if optional and raw == "":
            return None
        if type_name.startswith("list"):
            return [item.strip() for item in raw.split(",") if item.strip()]
        coercer = _COERCERS.get(type_name)
        if coercer is None:
            return raw
        try:
            return coercer(raw)
        except ValueError as exc:
            raise SettingCoercionError(key, raw, type_name, cause=exc) from exc


__all__ = ["EnvSettingsLoader", "SettingsLoader", "env_key"]
