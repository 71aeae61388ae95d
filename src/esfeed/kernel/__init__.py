"""Kernel – framework-agnostic errors, events and time primitives."""

from esfeed.kernel.errors import (
    BaseError,
    EventDecodeError,
    InvalidFeedUrlError,
    InvalidVersionError,
    NoMoreEventsError,
    NotFoundError,
    TemporarilyUnavailableError,
    UnauthorizedError,
    UnexpectedResponseError,
)
from esfeed.kernel.events import Event, EventLink, EventResponse, EventTypeRegistry

__all__ = [
    "BaseError",
    "Event",
    "EventDecodeError",
    "EventLink",
    "EventResponse",
    "EventTypeRegistry",
    "InvalidFeedUrlError",
    "InvalidVersionError",
    "NoMoreEventsError",
    "NotFoundError",
    "TemporarilyUnavailableError",
    "UnauthorizedError",
    "UnexpectedResponseError",
]
