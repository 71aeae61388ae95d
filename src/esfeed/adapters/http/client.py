"""HTTP adapter – EventStoreClient.

Thin async ``httpx`` wrapper that speaks the Atom feed protocol: it fetches
feed pages and event documents, applies basic authentication and default
headers, and maps non-2xx responses onto :mod:`esfeed.kernel.errors`.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Iterable

import httpx

from esfeed.adapters.http.errors import classify_status
from esfeed.feed.atom import FeedPage
from esfeed.feed.url import DEFAULT_PAGE_SIZE, Direction, build_feed_path
from esfeed.kernel.errors import EventDecodeError, TransportError
from esfeed.kernel.events import EventResponse
from esfeed.observability.logging import get_logger

if TYPE_CHECKING:
    from esfeed.config.settings import ClientSettings
    from esfeed.reader import StreamReader

ATOM_JSON = "application/vnd.eventstore.atom+json"
EVENTS_JSON = "application/vnd.eventstore.events+json"
LONG_POLL_HEADER = "ES-LongPoll"


class EventStoreClient:
    """Async client for the stream feed API.

    Args:
        base_url: Server URL, e.g. ``http://localhost:2113``.
        timeout: Per-request timeout in seconds.
        username / password: Optional basic-auth credentials.
        page_size: Default page size for readers created by this client.
        long_poll: Default long-poll directive (seconds) for new readers.
        transport: Optional ``httpx`` transport (``httpx.ASGITransport`` in tests).
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        username: str | None = None,
        password: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        long_poll: int = 0,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self.long_poll = long_poll
        self._auth: httpx.BasicAuth | None = None
        if username is not None and password is not None:
            self.set_basic_auth(username, password)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": EVENTS_JSON},
            **kwargs,
        )
        self._log = get_logger(__name__, base_url=self.base_url)

    @classmethod
    def from_settings(cls, settings: "ClientSettings", **kwargs: Any) -> "EventStoreClient":
        return cls(
            settings.base_url,
            timeout=settings.timeout,
            username=settings.username,
            password=settings.password,
            page_size=settings.page_size,
            long_poll=settings.long_poll,
            **kwargs,
        )

    async def __aenter__(self) -> "EventStoreClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    def set_basic_auth(self, username: str, password: str) -> None:
        """Use these credentials for every subsequent request.

        Readers fetch the credentials per request, so they can change without
        creating a new reader.
        """
        self._auth = httpx.BasicAuth(username, password)

    def new_stream_reader(self, stream_name: str, page_size: int | None = None) -> "StreamReader":
        from esfeed.reader import StreamReader

        reader = StreamReader(self, stream_name, page_size=page_size or self.page_size)
        if self.long_poll > 0:
            reader.long_poll(self.long_poll)
        return reader

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    async def read_feed_page(self, url: str, long_poll: int | None = None) -> FeedPage:
        """Fetch and decode the feed page at *url*."""
        headers = {"Accept": ATOM_JSON}
        if long_poll is not None and long_poll > 0:
            headers[LONG_POLL_HEADER] = str(long_poll)
        response = await self._request("GET", url, headers=headers)
        return FeedPage.from_dict(self._decode_json(response, url))

    async def get_event(self, url: str) -> EventResponse | None:
        """Fetch a single event document; ``None`` when the server returns ``{}``."""
        response = await self._request("GET", url, headers={"Accept": ATOM_JSON})
        raw = self._decode_json(response, url) if response.content.strip() else {}
        if not raw:
            return None
        return EventResponse.from_dict(raw)

    async def get_events(self, urls: Iterable[str]) -> list[EventResponse | None]:
        return [await self.get_event(url) for url in urls]

    async def get_metadata_url(self, stream: str) -> str | None:
        """Discover the stream's metadata URL through its head feed page."""
        page = await self.read_feed_page(build_feed_path(stream, Direction.BACKWARD, None, 1))
        link = page.get_link("metadata")
        return link.href if link is not None else None

    async def get_stream_metadata(self, stream: str) -> EventResponse | None:
        """Return the stream metadata document, or ``None`` when it is empty."""
        url = await self.get_metadata_url(stream)
        if url is None:
            return None
        return await self.get_event(url)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        if self._auth is not None:
            kwargs.setdefault("auth", self._auth)
        self._log.debug("esfeed.request", method=method, url=url)
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise TransportError(url, f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise TransportError(url, str(exc) or None, cause=exc) from exc

        error = classify_status(response.status_code, str(response.request.url), method, response.reason_phrase)
        if error is not None:
            self._log.warning("esfeed.response_error", method=method, url=url, status_code=response.status_code)
            raise error
        return response

    @staticmethod
    def _decode_json(response: httpx.Response, url: str) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise EventDecodeError(f"Response from {url} is not valid JSON", payload_type="json", cause=exc) from exc


__all__ = ["ATOM_JSON", "EVENTS_JSON", "LONG_POLL_HEADER", "EventStoreClient"]
