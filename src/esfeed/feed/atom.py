"""Feed – JSON Atom documents (FeedPage, FeedEntry, AtomLink).

The wire shape follows the ``application/vnd.eventstore.atom+json`` feed:
link relations are ``{"uri": ..., "relation": ...}`` objects and entries are
ordered newest-first.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from esfeed.kernel.errors import EventDecodeError

AUTHOR = "EventStore"


@dataclasses.dataclass(frozen=True)
class AtomLink:
    href: str
    rel: str

    def to_dict(self) -> dict[str, str]:
        return {"uri": self.href, "relation": self.rel}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "AtomLink":
        return cls(href=raw["uri"], rel=raw["relation"])


def _find_link(links: tuple[AtomLink, ...], rel: str) -> AtomLink | None:
    for link in links:
        if link.rel == rel:
            return link
    return None


@dataclasses.dataclass(frozen=True)
class FeedEntry:
    """Summary of one event inside a feed page."""

    title: str
    id: str
    updated: str
    summary: str
    links: tuple[AtomLink, ...] = ()
    author: str = AUTHOR

    def get_link(self, rel: str) -> AtomLink | None:
        return _find_link(self.links, rel)

    @property
    def event_url(self) -> str | None:
        """URL of the event resource (``alternate`` link, trailing ``/`` stripped)."""
        link = self.get_link("alternate") or self.get_link("edit")
        return link.href.rstrip("/") if link is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "id": self.id,
            "updated": self.updated,
            "author": {"name": self.author},
            "summary": self.summary,
            "links": [link.to_dict() for link in self.links],
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "FeedEntry":
        return cls(
            title=raw.get("title", ""),
            id=raw.get("id", ""),
            updated=raw.get("updated", ""),
            summary=raw.get("summary", ""),
            links=tuple(AtomLink.from_dict(item) for item in raw.get("links") or ()),
            author=(raw.get("author") or {}).get("name", AUTHOR),
        )


@dataclasses.dataclass(frozen=True)
class FeedPage:
    """A window over a stream's events as of some point in time."""

    title: str
    id: str
    updated: str
    stream_id: str
    links: tuple[AtomLink, ...] = ()
    entries: tuple[FeedEntry, ...] = ()
    head_of_stream: bool = False
    author: str = AUTHOR

    def get_link(self, rel: str) -> AtomLink | None:
        return _find_link(self.links, rel)

    def to_dict(self) -> dict[str, Any]:
        self_link = self.get_link("self")
        return {
            "title": self.title,
            "id": self.id,
            "updated": self.updated,
            "streamId": self.stream_id,
            "author": {"name": self.author},
            "headOfStream": self.head_of_stream,
            "selfUrl": self_link.href if self_link else self.id,
            "links": [link.to_dict() for link in self.links],
            "entries": [entry.to_dict() for entry in self.entries],
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "FeedPage":
        if not isinstance(raw, Mapping):
            raise EventDecodeError("Feed page is not a JSON object", payload_type="FeedPage")
        try:
            return cls(
                title=raw.get("title", ""),
                id=raw.get("id", ""),
                updated=raw.get("updated", ""),
                stream_id=raw.get("streamId", ""),
                links=tuple(AtomLink.from_dict(item) for item in raw.get("links") or ()),
                entries=tuple(FeedEntry.from_dict(item) for item in raw.get("entries") or ()),
                head_of_stream=bool(raw.get("headOfStream", False)),
                author=(raw.get("author") or {}).get("name", AUTHOR),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise EventDecodeError(f"Malformed feed page: {exc}", payload_type="FeedPage", cause=exc) from exc


__all__ = ["AUTHOR", "AtomLink", "FeedEntry", "FeedPage"]
