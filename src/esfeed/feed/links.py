"""Feed – navigation between pages.

The protocol's relation names are inverted relative to reading order:
``previous`` points to NEWER events and ``next`` points to OLDER ones.  Walk a
stream forward by following :func:`link_toward_newer`.  Do not "fix" the
mapping below; it mirrors what the server emits.
"""
from __future__ import annotations

from esfeed.feed.atom import AtomLink, FeedPage

REL_TOWARD_NEWER = "previous"
REL_TOWARD_OLDER = "next"


def link_toward_newer(page: FeedPage) -> AtomLink | None:
    """Link to the page holding the events appended after *page*'s window."""
    return page.get_link(REL_TOWARD_NEWER)


def link_toward_older(page: FeedPage) -> AtomLink | None:
    """Link to the page holding the events written before *page*'s window."""
    return page.get_link(REL_TOWARD_OLDER)


__all__ = ["REL_TOWARD_NEWER", "REL_TOWARD_OLDER", "link_toward_newer", "link_toward_older"]
