"""Config settings – Settings base class and ClientSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from esfeed.config.validation import InvalidSettingValueError
from esfeed.feed.url import DEFAULT_PAGE_SIZE


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ClientSettings(Settings):
    """Connection and reading defaults for :class:`EventStoreClient`.

    Loaded from ``ESFEED_*`` environment variables, e.g. ``ESFEED_BASE_URL``.
    """

    _prefix: ClassVar[str] = "ESFEED"

    base_url: str
    username: str | None = None
    password: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    long_poll: int = 0
    timeout: float = 10.0

    def _validate(self) -> None:
        if not self.base_url:
            raise InvalidSettingValueError("base_url", self.base_url, "must not be empty")
        if self.page_size < 1:
            raise InvalidSettingValueError("page_size", self.page_size, "must be >= 1")
        if self.long_poll < 0:
            raise InvalidSettingValueError("long_poll", self.long_poll, "must be >= 0")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be > 0")
        if (self.username is None) != (self.password is None):
            raise InvalidSettingValueError("username", self.username, "username and password go together")


__all__ = ["ClientSettings", "Settings"]
