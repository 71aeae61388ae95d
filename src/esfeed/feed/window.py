"""Feed – page-window algorithm.

Given the full ordered log (index == event number), a version, a page size and
a direction, compute which contiguous slice a feed page holds and which
boundary flags apply.  Link presence on rendered pages derives from these
flags alone.
"""
from __future__ import annotations

import dataclasses
from typing import Generic, Sequence, TypeVar

from esfeed.feed.url import Direction

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class PageWindow(Generic[T]):
    """Contiguous window over a log plus its boundary flags."""

    events: tuple[T, ...]
    start: int
    end: int
    is_first_page: bool
    """The window reaches the newest known event."""

    is_last_page: bool
    """The window touches event 0, so there is no older page."""

    is_head_of_stream: bool
    """The window's upper bound is the unwritten future."""

    def __len__(self) -> int:
        return len(self.events)


def page_window(
    log: Sequence[T],
    version: int | None,
    page_size: int,
    direction: Direction | str | None = Direction.BACKWARD,
) -> PageWindow[T]:
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    length = len(log)

    if length == 0:
        return PageWindow((), 0, 0, is_first_page=True, is_last_page=True, is_head_of_stream=True)

    if version is not None and direction == Direction.FORWARD:
        if version > length - 1:
            # polling past the head
            return PageWindow((), version, version, is_first_page=True, is_last_page=False, is_head_of_stream=True)
        if version < 0:
            return PageWindow((), version, version, is_first_page=False, is_last_page=True, is_head_of_stream=False)
        start = version
        end = min(start + page_size, length)
    else:
        end = length if version is None else min(version + 1, length)
        start = max(end - page_size, 0)

    return PageWindow(
        events=tuple(log[start:end]),
        start=start,
        end=end,
        is_first_page=end >= length - 1,
        is_last_page=start <= 0,
        is_head_of_stream=end == length,
    )


__all__ = ["PageWindow", "page_window"]
