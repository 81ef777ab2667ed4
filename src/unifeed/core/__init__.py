"""Core module for Unifeed - canonical types, configuration, and utilities."""

from unifeed.core.types import (
    UNKNOWN_VERSION,
    Extension,
    Extensions,
    Feed,
    FeedType,
    Image,
    Item,
)
from unifeed.core.config import FeedSettings
from unifeed.core.exceptions import (
    DateParseError,
    ExtensionError,
    FeedError,
    FetchError,
    HTTPError,
    ParseError,
    StructureError,
    UnknownFeedTypeError,
)

__all__ = [
    # Types
    "Extension",
    "Extensions",
    "Feed",
    "FeedType",
    "Image",
    "Item",
    "UNKNOWN_VERSION",
    # Config
    "FeedSettings",
    # Exceptions
    "FeedError",
    "ParseError",
    "StructureError",
    "ExtensionError",
    "DateParseError",
    "UnknownFeedTypeError",
    "FetchError",
    "HTTPError",
]
