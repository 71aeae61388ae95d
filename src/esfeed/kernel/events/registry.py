"""Kernel events – payload decoding and the EventTypeRegistry.

Event type names are never derived from a value's runtime class.  Callers
either name the type explicitly or register a logical type name together with
the strategy that decodes its payload::

    registry = EventTypeRegistry()
    registry.register("OrderPlaced", OrderPlaced)
    registry.register("OrderCancelled", lambda raw: Cancelled(raw["id"]))

    payload = registry.decode(response.event.type, response.event.data)
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, TypeVar, Union

from esfeed.kernel.errors import EventDecodeError

T = TypeVar("T")

Decoder = Union[type, Callable[[Any], Any]]


def decode_payload(payload: Any, target: Decoder | None, *, what: str = "data") -> Any:
    """Project a decoded JSON *payload* into *target*.

    * ``None`` target – the payload is returned as is.
    * a class exposing ``model_validate`` – validated through it.
    * any other class – instantiated with the mapping's keys (or the bare value).
    * a callable – called with the payload.

    Raises:
        EventDecodeError: the payload is absent or does not fit the target.
    """
    if target is None:
        return payload
    if payload is None:
        raise EventDecodeError(f"Event {what} is absent", payload_type=what)
    if not callable(target):
        raise EventDecodeError(f"Cannot decode event {what} into {target!r}", payload_type=what)
    try:
        if isinstance(target, type):
            if hasattr(target, "model_validate"):
                return target.model_validate(payload)
            if isinstance(payload, Mapping):
                return target(**payload)
        return target(payload)
    except EventDecodeError:
        raise
    except (TypeError, ValueError, KeyError) as exc:
        name = getattr(target, "__name__", repr(target))
        raise EventDecodeError(
            f"Could not decode event {what} into {name}: {exc}",
            payload_type=name,
            cause=exc,
        ) from exc


class EventTypeRegistry:
    """Maps logical event type names to decoding strategies."""

    def __init__(self) -> None:
        self._decoders: dict[str, Decoder] = {}
        self._names: dict[type, str] = {}

    def register(self, event_type: str, decoder: Decoder) -> None:
        if not event_type:
            raise ValueError("event_type must be a non-empty string")
        self._decoders[event_type] = decoder
        if isinstance(decoder, type):
            self._names[decoder] = event_type

    def __contains__(self, event_type: object) -> bool:
        return event_type in self._decoders

    def decoder_for(self, event_type: str) -> Decoder:
        try:
            return self._decoders[event_type]
        except KeyError:
            raise EventDecodeError(
                f"No decoder registered for event type {event_type!r}",
                payload_type=event_type,
            ) from None

    def type_name_for(self, value: Any) -> str:
        """Return the registered type name of *value*'s class."""
        try:
            return self._names[type(value)]
        except KeyError:
            raise KeyError(f"{type(value).__name__!r} is not registered with an event type") from None

    def decode(self, event_type: str, payload: Any) -> Any:
        return decode_payload(payload, self.decoder_for(event_type))


__all__ = ["Decoder", "EventTypeRegistry", "decode_payload"]
