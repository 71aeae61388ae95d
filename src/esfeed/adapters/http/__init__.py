"""HTTP adapter – async feed client and response classification."""
from esfeed.adapters.http.client import ATOM_JSON, EVENTS_JSON, LONG_POLL_HEADER, EventStoreClient
from esfeed.adapters.http.errors import classify_status

__all__ = ["ATOM_JSON", "EVENTS_JSON", "LONG_POLL_HEADER", "EventStoreClient", "classify_status"]
