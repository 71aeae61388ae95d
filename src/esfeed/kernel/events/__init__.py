"""Kernel events – stream events, event documents and payload decoding."""
from esfeed.kernel.events.event import Event, EventLink, EventResponse
from esfeed.kernel.events.registry import Decoder, EventTypeRegistry, decode_payload

__all__ = ["Decoder", "Event", "EventLink", "EventResponse", "EventTypeRegistry", "decode_payload"]
