"""Feed – URL codec, page windowing, link navigation and Atom documents."""
from esfeed.feed.atom import AtomLink, FeedEntry, FeedPage
from esfeed.feed.links import REL_TOWARD_NEWER, REL_TOWARD_OLDER, link_toward_newer, link_toward_older
from esfeed.feed.url import DEFAULT_PAGE_SIZE, HEAD, Direction, FeedRequest, build_feed_path, parse_feed_url
from esfeed.feed.window import PageWindow, page_window

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "HEAD",
    "REL_TOWARD_NEWER",
    "REL_TOWARD_OLDER",
    "AtomLink",
    "Direction",
    "FeedEntry",
    "FeedPage",
    "FeedRequest",
    "PageWindow",
    "build_feed_path",
    "link_toward_newer",
    "link_toward_older",
    "page_window",
    "parse_feed_url",
]
