"""Testing generators – event fixtures and hypothesis strategies."""
from esfeed.testing.generators.events import (
    create_test_event,
    create_test_event_from_data,
    create_test_event_response,
    create_test_events,
    event_url,
)
from esfeed.testing.generators.strategies import (
    event_log_strategy,
    feed_request_strategy,
    stream_name_strategy,
)

__all__ = [
    "create_test_event",
    "create_test_event_from_data",
    "create_test_event_response",
    "create_test_events",
    "event_log_strategy",
    "event_url",
    "feed_request_strategy",
    "stream_name_strategy",
]
