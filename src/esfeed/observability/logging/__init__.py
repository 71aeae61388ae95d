"""Observability – structured logging helpers."""
from esfeed.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from esfeed.observability.logging.factory import JsonLoggerFactory
from esfeed.observability.logging.processors import StreamContextProcessor, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "StreamContextProcessor",
    "get_logger",
]
