"""Infrastructure errors – transport failures and unexpected server responses."""

from __future__ import annotations

from typing import Any

from esfeed.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a protocol rule violation."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """The request never produced an HTTP response (connection, timeout, …)."""

    default_code = "transport_error"

    def __init__(self, url: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not reach '{url}'", **kwargs)
        self.url = url


class ResponseError(InfrastructureError):
    """The server answered with a non-2xx status."""

    default_code = "response_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        url: str | None = None,
        method: str = "GET",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, status_code=status_code, **kwargs)
        self.url = url
        self.method = method


class TemporarilyUnavailableError(ResponseError):
    """The server is not ready yet (503)."""

    default_code = "temporarily_unavailable"
    http_status = 503


class UnexpectedResponseError(ResponseError):
    """Any non-2xx status without a dedicated error type."""

    default_code = "unexpected_response"


class BadRequestError(UnexpectedResponseError):
    """The server rejected the request (400)."""

    default_code = "bad_request"
    http_status = 400


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class EventDecodeError(SerializationError):
    """An event document or payload could not be projected into its target."""

    default_code = "event_decode_error"


__all__ = [
    "BadRequestError",
    "EventDecodeError",
    "InfrastructureError",
    "ResponseError",
    "SerializationError",
    "TemporarilyUnavailableError",
    "TransportError",
    "UnexpectedResponseError",
]
