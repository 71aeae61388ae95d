"""Unit tests – kernel error hierarchy and HTTP status classification."""
from __future__ import annotations

import json

import pytest

from esfeed.adapters.http.errors import classify_status
from esfeed.kernel.errors import (
    ApplicationError,
    BadRequestError,
    BaseError,
    DomainError,
    EventDecodeError,
    InfrastructureError,
    InvalidFeedUrlError,
    InvalidVersionError,
    NoMoreEventsError,
    NotFoundError,
    ResponseError,
    SerializationError,
    TemporarilyUnavailableError,
    TransportError,
    UnauthorizedError,
    UnexpectedResponseError,
    ValidationError,
)


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------

class TestHierarchy:
    @pytest.mark.parametrize(
        "child,parent",
        [
            (InvalidVersionError, ValidationError),
            (InvalidFeedUrlError, ValidationError),
            (ValidationError, DomainError),
            (NotFoundError, DomainError),
            (NoMoreEventsError, ApplicationError),
            (UnauthorizedError, ApplicationError),
            (TemporarilyUnavailableError, ResponseError),
            (BadRequestError, UnexpectedResponseError),
            (UnexpectedResponseError, ResponseError),
            (ResponseError, InfrastructureError),
            (TransportError, InfrastructureError),
            (EventDecodeError, SerializationError),
            (SerializationError, InfrastructureError),
        ],
    )
    def test_subclass(self, child: type, parent: type) -> None:
        assert issubclass(child, parent)
        assert issubclass(child, BaseError)

    def test_no_more_events_is_not_infrastructure(self) -> None:
        assert not issubclass(NoMoreEventsError, InfrastructureError)


# ---------------------------------------------------------------------------
# BaseError behaviour
# ---------------------------------------------------------------------------

class TestBaseError:
    def test_default_code(self) -> None:
        assert NoMoreEventsError().code == "no_more_events"
        assert InvalidVersionError(-1).code == "invalid_version"

    def test_custom_code_and_detail(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        assert err.to_dict() == {"code": "custom", "message": "boom", "detail": {"k": 1}}

    def test_str_is_json(self) -> None:
        err = NotFoundError("event", 7)
        payload = json.loads(str(err))
        assert payload["code"] == "not_found"
        assert payload["message"] == "event '7' not found"

    def test_cause_is_chained(self) -> None:
        original = ValueError("bad")
        err = EventDecodeError("decode failed", cause=original)
        assert err.__cause__ is original
        assert "cause" in err.to_dict()

    def test_invalid_version_keeps_value(self) -> None:
        err = InvalidVersionError(-3)
        assert err.version == -3
        assert "-3" in err.message

    def test_no_more_events_default_message(self) -> None:
        assert NoMoreEventsError().message == "There are no more events to load."

    def test_unauthorized_default_status(self) -> None:
        assert UnauthorizedError().status_code == 401

    def test_status_code_only_serialised_when_known(self) -> None:
        assert "status_code" not in NotFoundError("event", 3).to_dict()
        assert NotFoundError("event", 3, status_code=404).to_dict()["status_code"] == 404
        assert "status_code=404" in repr(NotFoundError("event", 3, status_code=404))

    @pytest.mark.parametrize(
        "error,status",
        [
            (InvalidVersionError(-1), 400),
            (InvalidFeedUrlError("bad"), 400),
            (ValidationError("bad"), 400),
            (NotFoundError("event", 1), 404),
            (UnauthorizedError(), 401),
            (TemporarilyUnavailableError("later", status_code=503), 503),
            (BadRequestError("no", status_code=400), 400),
            (UnexpectedResponseError("odd", status_code=418), 500),
            (NoMoreEventsError(), 500),
            (EventDecodeError("broken"), 500),
        ],
    )
    def test_http_status(self, error: BaseError, status: int) -> None:
        assert error.http_status == status


# ---------------------------------------------------------------------------
# Status classification
# ---------------------------------------------------------------------------

class TestClassifyStatus:
    URL = "http://es.test/streams/orders"

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_success_is_none(self, status: int) -> None:
        assert classify_status(status, self.URL) is None

    def test_400_bad_request(self) -> None:
        err = classify_status(400, self.URL, "GET", "Bad Request")
        assert isinstance(err, BadRequestError)
        assert err.status_code == 400
        assert err.url == self.URL

    def test_401_unauthorized(self) -> None:
        assert isinstance(classify_status(401, self.URL), UnauthorizedError)

    def test_404_not_found(self) -> None:
        err = classify_status(404, self.URL)
        assert isinstance(err, NotFoundError)
        assert err.status_code == 404
        assert err.identifier == self.URL
        assert err.to_dict()["status_code"] == 404

    def test_503_temporarily_unavailable(self) -> None:
        err = classify_status(503, self.URL)
        assert isinstance(err, TemporarilyUnavailableError)
        assert not isinstance(err, UnexpectedResponseError)

    @pytest.mark.parametrize("status", [302, 409, 418, 500, 502])
    def test_other_statuses_unexpected(self, status: int) -> None:
        err = classify_status(status, self.URL, "GET", "Whatever")
        assert type(err) is UnexpectedResponseError
        assert err.status_code == status
        assert str(status) in err.message
