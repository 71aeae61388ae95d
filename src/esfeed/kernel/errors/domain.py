"""Domain errors – caller mistakes and missing resources."""

from __future__ import annotations

from typing import Any

from esfeed.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a protocol rule is violated by the caller."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input does not meet the feed protocol's rules."""

    default_code = "validation_error"
    http_status = 400


class InvalidVersionError(ValidationError):
    """An event number outside the valid domain (negative or malformed).

    Never retriable: event numbers start at zero and negative ones never exist.
    """

    default_code = "invalid_version"

    def __init__(self, version: Any, **kwargs: Any) -> None:
        super().__init__(f"{version} is not a valid event number", **kwargs)
        self.version = version


class InvalidFeedUrlError(ValidationError):
    """A feed URL or its parts cannot be encoded or decoded."""

    default_code = "invalid_feed_url"

    def __init__(self, message: str, *, url: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.url = url


class NotFoundError(DomainError):
    """The stream or event does not currently exist at the server."""

    default_code = "not_found"
    http_status = 404

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = [
    "DomainError",
    "InvalidFeedUrlError",
    "InvalidVersionError",
    "NotFoundError",
    "ValidationError",
]
