"""Feed – URL codec for stream feed pages.

Canonical feed path::

    /streams/{stream}/{version|head}/{forward|backward}/{page_size}

A bare ``/streams/{stream}`` means the most recent page read backward with the
default page size.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from urllib.parse import quote, unquote, urlsplit

from esfeed.kernel.errors import InvalidFeedUrlError, InvalidVersionError

DEFAULT_PAGE_SIZE = 20
HEAD = "head"


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclasses.dataclass(frozen=True)
class FeedRequest:
    """Decoded form of a feed URL.  ``version`` of ``None`` means head of stream."""

    host: str
    stream: str
    direction: Direction = Direction.BACKWARD
    version: int | None = None
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def stream_url(self) -> str:
        return f"{self.host}/streams/{quote(self.stream, safe='')}"


def _coerce_direction(direction: Direction | str | None) -> Direction:
    if direction is None or direction == "":
        return Direction.BACKWARD
    try:
        return Direction(direction)
    except ValueError:
        raise InvalidFeedUrlError(f"Invalid direction {direction!r}") from None


def build_feed_path(
    stream: str,
    direction: Direction | str | None = None,
    version: int | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> str:
    """Return the feed path for *stream*.

    Raises:
        InvalidVersionError: *version* is negative.
        InvalidFeedUrlError: empty stream, unknown direction or page size < 1.
    """
    if not stream:
        raise InvalidFeedUrlError("Stream name must not be empty")
    resolved = _coerce_direction(direction)
    if version is not None and version < 0:
        raise InvalidVersionError(version)
    if page_size < 1:
        raise InvalidFeedUrlError(f"Page size must be at least 1, got {page_size}")
    token = HEAD if version is None else str(version)
    return f"/streams/{quote(stream, safe='')}/{token}/{resolved.value}/{page_size}"


def _parse_version(token: str, url: str) -> int | None:
    if token == HEAD:
        return None
    try:
        version = int(token)
    except ValueError:
        raise InvalidVersionError(token, detail={"url": url}) from None
    if version < 0:
        raise InvalidVersionError(version, detail={"url": url})
    return version


def parse_feed_url(url: str) -> FeedRequest:
    """Decode a feed URL (absolute or path-only) into a :class:`FeedRequest`.

    Raises:
        InvalidVersionError: the version segment is negative or malformed.
        InvalidFeedUrlError: the URL is not a feed URL.
    """
    parts = urlsplit(url)
    host = f"{parts.scheme}://{parts.netloc}" if parts.scheme and parts.netloc else ""
    segments = parts.path.strip("/").split("/")

    if len(segments) < 2 or segments[0] != "streams" or not segments[1]:
        raise InvalidFeedUrlError(f"Not a stream feed URL: {url!r}", url=url)
    stream = unquote(segments[1])

    if len(segments) == 2:
        return FeedRequest(host=host, stream=stream)
    if len(segments) != 5:
        raise InvalidFeedUrlError(f"Not a stream feed URL: {url!r}", url=url)

    version = _parse_version(segments[2], url)
    direction = _coerce_direction(segments[3])
    try:
        page_size = int(segments[4])
    except ValueError:
        raise InvalidFeedUrlError(f"Invalid page size {segments[4]!r}", url=url) from None
    if page_size < 1:
        raise InvalidFeedUrlError(f"Page size must be at least 1, got {page_size}", url=url)

    return FeedRequest(
        host=host,
        stream=stream,
        direction=direction,
        version=version,
        page_size=page_size,
    )


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "HEAD",
    "Direction",
    "FeedRequest",
    "build_feed_path",
    "parse_feed_url",
]
