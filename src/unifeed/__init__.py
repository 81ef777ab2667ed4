"""Unifeed - one feed model for RSS, Atom and XML sitemaps.

Detect. Extract. Translate.

Unifeed reads syndication documents in any of the supported dialects
with a streaming extractor and normalizes them into a single Feed/Item
model, so crawlers and ingestion pipelines can treat every source alike.

Example:
    >>> from unifeed import FeedParser
    >>>
    >>> parser = FeedParser()
    >>> feed = parser.parse_string(open("sitemap.xml").read())
    >>> print(feed.version, len(feed.items))
    >>>
    >>> # Or fetch over HTTP
    >>> feed = parser.parse_url("https://example.com/feed.xml")
"""

from unifeed._version import __version__
from unifeed.core.config import FeedSettings, configure, get_settings
from unifeed.core.exceptions import (
    ExtensionError,
    FeedError,
    FetchError,
    HTTPError,
    ParseError,
    StructureError,
    UnknownFeedTypeError,
)
from unifeed.core.logging import get_logger, setup_logging
from unifeed.core.types import Extension, Feed, FeedType, Image, Item
from unifeed.detector import detect_feed_type

__all__ = [
    # Version
    "__version__",
    # Core types
    "Feed",
    "Item",
    "Image",
    "Extension",
    "FeedType",
    # Config
    "FeedSettings",
    "get_settings",
    "configure",
    # Exceptions
    "FeedError",
    "ParseError",
    "StructureError",
    "ExtensionError",
    "UnknownFeedTypeError",
    "FetchError",
    "HTTPError",
    # Logging
    "get_logger",
    "setup_logging",
    # Detection
    "detect_feed_type",
    # Parsing (lazy)
    "FeedParser",
    "FeedFetcher",
]


def __getattr__(name: str):
    """Lazy import for modules pulling in the HTTP stack."""
    if name == "FeedParser":
        from unifeed.parser import FeedParser
        return FeedParser

    if name == "FeedFetcher":
        from unifeed.acquire.fetcher import FeedFetcher
        return FeedFetcher

    raise AttributeError(f"module 'unifeed' has no attribute {name!r}")
