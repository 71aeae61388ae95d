"""Unit tests – structlog configuration, redaction and stream context."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest
import structlog

from esfeed.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    StreamContextProcessor,
    get_logger,
)


@pytest.fixture
def json_logging(capsys: pytest.CaptureFixture[str]) -> Iterator[None]:  # noqa: ARG001
    JsonLoggerFactory.configure(logging.DEBUG)
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_defaults_cover_credentials(self) -> None:
        assert "password" in DEFAULT_SENSITIVE_FIELDS
        assert "authorization" in DEFAULT_SENSITIVE_FIELDS

    def test_redact_flat(self) -> None:
        redacted = SensitiveFieldsFilter().redact({"password": "changeit", "user": "admin"})
        assert redacted == {"password": "[REDACTED]", "user": "admin"}

    def test_redact_is_case_insensitive(self) -> None:
        assert SensitiveFieldsFilter().redact({"Authorization": "Basic x"})["Authorization"] == "[REDACTED]"

    def test_redact_deep(self) -> None:
        data = {"request": {"headers": {"authorization": "Basic x"}, "url": "/streams/a"}}
        redacted = SensitiveFieldsFilter().redact_deep(data)
        assert redacted["request"]["headers"]["authorization"] == "[REDACTED]"
        assert redacted["request"]["url"] == "/streams/a"

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"token"}))
        assert f.redact({"token": "t", "password": "p"}) == {"token": "[REDACTED]", "password": "p"}

    def test_usable_as_processor(self) -> None:
        out = SensitiveFieldsFilter()(None, "info", {"event": "x", "password": "p"})
        assert out == {"event": "x", "password": "[REDACTED]"}


# ---------------------------------------------------------------------------
# StreamContextProcessor
# ---------------------------------------------------------------------------


class TestStreamContextProcessor:
    def test_adds_stream_url(self) -> None:
        out = StreamContextProcessor()(None, "debug", {"stream": "orders", "base_url": "http://es.test/"})
        assert out["stream_url"] == "http://es.test/streams/orders"

    def test_requires_both_values(self) -> None:
        assert "stream_url" not in StreamContextProcessor()(None, "debug", {"stream": "orders"})
        assert "stream_url" not in StreamContextProcessor()(None, "debug", {"base_url": "http://es.test"})


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_emits_json_lines(self, json_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        log = get_logger("esfeed.test", stream="orders", base_url="http://es.test")
        log.info("esfeed.reader.exhausted", next_version=25, password="secret")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "esfeed.reader.exhausted"
        assert payload["level"] == "info"
        assert payload["logger"] == "esfeed.test"
        assert payload["next_version"] == 25
        assert payload["password"] == "[REDACTED]"
        assert payload["stream_url"] == "http://es.test/streams/orders"
        assert "timestamp" in payload

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        try:
            get_logger("esfeed.quiet").debug("hidden")
            assert capsys.readouterr().err == ""
        finally:
            structlog.reset_defaults()
            logging.getLogger().handlers.clear()
