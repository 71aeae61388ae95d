"""Observability – structlog processors and the get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class StreamContextProcessor:
    """structlog processor that copies a bound ``stream`` into ``stream_url``.

    Only applies when a ``base_url`` is bound as well, so log lines from the
    client and the reader can be joined on the full stream URL.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        stream = event_dict.get("stream")
        base_url = event_dict.get("base_url")
        if stream and base_url:
            event_dict.setdefault("stream_url", f"{str(base_url).rstrip('/')}/streams/{stream}")
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["StreamContextProcessor", "get_logger"]
