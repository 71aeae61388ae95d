"""Reader – StreamReader, a forward cursor over one stream.

The reader is a cursor, not an enumerator: :meth:`StreamReader.advance` always
hands control back to the caller, who inspects :attr:`StreamReader.last_error`
to decide whether to process the event, wait, long-poll or stop::

    reader = client.new_stream_reader("orders")
    while await reader.advance():
        if isinstance(reader.last_error, NoMoreEventsError):
            reader.long_poll(15)
            continue
        if reader.last_error is not None:
            await asyncio.sleep(10)
            continue
        order, meta = reader.scan(OrderPlaced, OrderMeta)

A reader performs at most two requests per advance (page, then event) and
must not be advanced concurrently; use one reader per consumer.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, AsyncIterator

from esfeed.feed.atom import FeedPage
from esfeed.feed.links import link_toward_newer
from esfeed.feed.url import DEFAULT_PAGE_SIZE, Direction, build_feed_path, parse_feed_url
from esfeed.kernel.errors import BaseError, EventDecodeError, InvalidVersionError, NoMoreEventsError
from esfeed.kernel.events import Decoder, EventResponse, EventTypeRegistry, decode_payload
from esfeed.observability.logging import get_logger

if TYPE_CHECKING:
    from esfeed.adapters.http import EventStoreClient


class ReaderState(str, Enum):
    INITIAL = "initial"
    PAGE_LOADED = "page_loaded"
    AWAITING_NEXT_PAGE = "awaiting_next_page"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class StreamReader:
    """Walks a stream oldest-first, one event per :meth:`advance`."""

    def __init__(
        self,
        client: "EventStoreClient",
        stream_name: str,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._client = client
        self._stream_name = stream_name
        self._page_size = page_size
        self._version = -1
        self._next_version = 0
        self._page: FeedPage | None = None
        self._page_start = 0
        self._index_within_page = -1
        self._event_response: EventResponse | None = None
        self._last_error: BaseError | None = None
        self._state = ReaderState.INITIAL
        self._long_poll = 0
        self._log = get_logger(__name__, stream=stream_name, base_url=client.base_url)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def stream_name(self) -> str:
        return self._stream_name

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def version(self) -> int:
        """Number of the last delivered event; ``-1`` before the first one."""
        return self._version

    @property
    def next_version(self) -> int:
        return self._next_version

    @property
    def loaded_page(self) -> FeedPage | None:
        return self._page

    @property
    def index_within_page(self) -> int:
        """Reverse index (entries are newest-first) of the next entry to consume."""
        return self._index_within_page

    @property
    def event_response(self) -> EventResponse | None:
        return self._event_response

    @property
    def last_error(self) -> BaseError | None:
        return self._last_error

    @property
    def state(self) -> ReaderState:
        return self._state

    def long_poll(self, seconds: int) -> None:
        """Set (``seconds > 0``) or clear the long-poll directive.

        The directive is sent on page requests issued while the reader is
        exhausted; event requests never carry it.
        """
        self._long_poll = seconds if seconds > 0 else 0

    def set_version(self, version: int) -> None:
        """Reposition the cursor so the next advance delivers *version*."""
        if version < 0:
            raise InvalidVersionError(version)
        self._next_version = version
        self._version = version - 1
        self._page = None
        self._index_within_page = -1
        self._event_response = None
        self._last_error = None
        self._state = ReaderState.INITIAL

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def _offset(self) -> int:
        # equals next_version % page_size for pages that start on a page boundary
        return self._next_version - self._page_start

    def _covers(self, page: FeedPage | None) -> bool:
        return page is not None and 0 <= self._offset() < len(page.entries)

    def _next_page_url(self) -> str:
        if self._page is not None:
            newer = link_toward_newer(self._page)
            if newer is not None:
                return newer.href
        return build_feed_path(self._stream_name, Direction.FORWARD, self._next_version, self._page_size)

    async def _load_page(self) -> None:
        url = self._next_page_url()
        long_poll = self._long_poll if self._state is ReaderState.EXHAUSTED and self._long_poll > 0 else None
        self._state = ReaderState.AWAITING_NEXT_PAGE
        self._log.debug("esfeed.reader.fetch_page", url=url, long_poll=long_poll)

        page = await self._client.read_feed_page(url, long_poll=long_poll)
        requested = parse_feed_url(url).version
        self._page = page
        self._page_start = requested if requested is not None else self._next_version
        self._state = ReaderState.PAGE_LOADED

    async def advance(self) -> bool:
        """Move to the next event.

        Always returns ``True`` so it can drive a ``while`` loop; outcomes are
        reported through :attr:`last_error` and :attr:`event_response`.
        """
        self._last_error = None
        try:
            if not self._covers(self._page):
                await self._load_page()

            page = self._page
            if page is None or not self._covers(page):
                self._event_response = None
                self._last_error = NoMoreEventsError()
                self._state = ReaderState.EXHAUSTED
                self._log.info("esfeed.reader.exhausted", next_version=self._next_version)
                return True

            entries = page.entries
            self._index_within_page = len(entries) - 1 - self._offset()
            entry = entries[self._index_within_page]
            url = entry.event_url
            if url is None:
                raise EventDecodeError(f"Feed entry {entry.title!r} has no event link", payload_type="FeedEntry")

            response = await self._client.get_event(url)
            if response is None:
                raise EventDecodeError(f"Empty event document at {url}", payload_type="EventResponse")

            self._event_response = response
            self._version = self._next_version
            self._next_version += 1
            self._index_within_page -= 1
            self._state = ReaderState.PAGE_LOADED
        except BaseError as exc:
            self._event_response = None
            self._last_error = exc
            self._state = ReaderState.FAILED
            self._log.warning("esfeed.reader.failed", error=exc.code, next_version=self._next_version)
        return True

    async def events(self) -> AsyncIterator[EventResponse]:
        """Yield events up to the current head of the stream.

        Stops at the first :class:`NoMoreEventsError`; any other recorded error
        is raised.
        """
        while await self.advance():
            if isinstance(self._last_error, NoMoreEventsError):
                return
            if self._last_error is not None:
                raise self._last_error
            response = self._event_response
            if response is None:
                return
            yield response

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def scan(
        self,
        data_target: Decoder | None = None,
        meta_target: Decoder | None = None,
        *,
        registry: EventTypeRegistry | None = None,
    ) -> tuple[Any, Any]:
        """Project the delivered event's data and metadata into the targets.

        Raises:
            BaseError: the error recorded by the last advance, unchanged.
            NoMoreEventsError: no event is currently delivered.
            EventDecodeError: the payload is absent or does not fit a target.
        """
        if self._last_error is not None:
            raise self._last_error
        if self._event_response is None:
            raise NoMoreEventsError()

        event = self._event_response.event
        if registry is not None and data_target is None:
            data = registry.decode(event.type, event.data)
        else:
            data = decode_payload(event.data, data_target)

        meta = event.metadata
        if meta_target is not None:
            meta = None if meta in (None, "") else decode_payload(meta, meta_target, what="metadata")
        return data, meta

    async def metadata(self) -> EventResponse | None:
        """Stream metadata document, or ``None`` when the stream has none."""
        return await self._client.get_stream_metadata(self._stream_name)


__all__ = ["ReaderState", "StreamReader"]
