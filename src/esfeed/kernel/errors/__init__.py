"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   │   ├── InvalidVersionError
    │   │   └── InvalidFeedUrlError
    │   └── NotFoundError
    ├── ApplicationError         (application.py)
    │   ├── NoMoreEventsError
    │   └── UnauthorizedError
    └── InfrastructureError      (infrastructure.py)
        ├── TransportError
        ├── ResponseError
        │   ├── TemporarilyUnavailableError
        │   └── UnexpectedResponseError
        │       └── BadRequestError
        └── SerializationError
            └── EventDecodeError
"""

from esfeed.kernel.errors.application import (
    ApplicationError,
    NoMoreEventsError,
    UnauthorizedError,
)
from esfeed.kernel.errors.base import BaseError
from esfeed.kernel.errors.domain import (
    DomainError,
    InvalidFeedUrlError,
    InvalidVersionError,
    NotFoundError,
    ValidationError,
)
from esfeed.kernel.errors.infrastructure import (
    BadRequestError,
    EventDecodeError,
    InfrastructureError,
    ResponseError,
    SerializationError,
    TemporarilyUnavailableError,
    TransportError,
    UnexpectedResponseError,
)

__all__ = [
    "ApplicationError",
    "BadRequestError",
    "BaseError",
    "DomainError",
    "EventDecodeError",
    "InfrastructureError",
    "InvalidFeedUrlError",
    "InvalidVersionError",
    "NoMoreEventsError",
    "NotFoundError",
    "ResponseError",
    "SerializationError",
    "TemporarilyUnavailableError",
    "TransportError",
    "UnauthorizedError",
    "UnexpectedResponseError",
    "ValidationError",
]
