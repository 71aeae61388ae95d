"""Application-layer errors – conditions the reading loop is expected to handle."""

from __future__ import annotations

from typing import Any

from esfeed.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class NoMoreEventsError(ApplicationError):
    """The requested window is currently empty.

    Not a failure: the reader is at the head of the stream and may wait or
    long-poll for new events.
    """

    default_code = "no_more_events"

    def __init__(self, message: str = "There are no more events to load.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class UnauthorizedError(ApplicationError):
    """Missing or insufficient credentials for the stream."""

    default_code = "unauthorized"
    http_status = 401

    def __init__(
        self,
        message: str = "You are not authorised to access the stream or the stream does not exist.",
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("status_code", self.http_status)
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "NoMoreEventsError",
    "UnauthorizedError",
]
