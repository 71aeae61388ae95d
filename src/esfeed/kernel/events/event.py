"""Kernel events – Event, EventLink, EventResponse."""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from esfeed.kernel.errors import EventDecodeError


@dataclasses.dataclass(frozen=True)
class EventLink:
    """A named URL locating an event resource (``edit`` / ``alternate``)."""

    uri: str
    relation: str

    def to_dict(self) -> dict[str, str]:
        return {"uri": self.uri, "relation": self.relation}


@dataclasses.dataclass(frozen=True)
class Event:
    """An already-appended fact read from a stream.

    Numbers are assigned by the server; this package never creates them for
    real streams, only for simulator fixtures.
    """

    stream_id: str
    """Name of the stream the event belongs to."""

    number: int
    """Zero-based, dense position of the event within its stream."""

    type: str
    """Logical event type name (``eventType`` on the wire)."""

    id: str
    """Opaque event identifier (``eventId`` on the wire)."""

    data: Any = None
    """Decoded JSON payload."""

    metadata: Any = None
    """Decoded JSON metadata; may be empty."""

    links: tuple[EventLink, ...] = ()
    """At least ``edit`` and ``alternate`` links for server-produced events."""

    def link(self, relation: str) -> EventLink | None:
        for candidate in self.links:
            if candidate.relation == relation:
                return candidate
        return None

    @property
    def url(self) -> str | None:
        """URL of the event resource, taken from the first link."""
        return self.links[0].uri if self.links else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "eventStreamId": self.stream_id,
            "eventNumber": self.number,
            "eventType": self.type,
            "eventId": self.id,
            "data": self.data,
            "links": [link.to_dict() for link in self.links],
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Event":
        if not isinstance(raw, Mapping):
            raise EventDecodeError("Event content is not a JSON object", payload_type=type(raw).__name__)
        try:
            links = tuple(
                EventLink(uri=item["uri"], relation=item["relation"])
                for item in raw.get("links") or ()
            )
            return cls(
                stream_id=raw.get("eventStreamId", ""),
                number=int(raw.get("eventNumber", 0)),
                type=raw.get("eventType", ""),
                id=raw.get("eventId", ""),
                data=raw.get("data"),
                metadata=raw.get("metadata"),
                links=links,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise EventDecodeError(f"Malformed event content: {exc}", payload_type="Event", cause=exc) from exc


@dataclasses.dataclass(frozen=True)
class EventResponse:
    """Event document: the Atom envelope the server returns for one event."""

    title: str
    id: str
    updated: str
    summary: str
    event: Event

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "id": self.id,
            "updated": self.updated,
            "summary": self.summary,
            "content": self.event.to_dict(),
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "EventResponse":
        if not isinstance(raw, Mapping) or "content" not in raw:
            raise EventDecodeError("Event document has no content", payload_type="EventResponse")
        return cls(
            title=raw.get("title", ""),
            id=raw.get("id", ""),
            updated=raw.get("updated", ""),
            summary=raw.get("summary", ""),
            event=Event.from_dict(raw["content"]),
        )


__all__ = ["Event", "EventLink", "EventResponse"]
