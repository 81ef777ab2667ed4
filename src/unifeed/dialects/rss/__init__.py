"""RSS dialect (RSS 0.9x, 2.0 and RDF-based 0.9/1.0)."""

from unifeed.dialects.rss.parser import RSSParser
from unifeed.dialects.rss.translator import DefaultRSSTranslator
from unifeed.dialects.rss.types import RSSEnclosure, RSSFeed, RSSItem

__all__ = [
    "RSSParser",
    "DefaultRSSTranslator",
    "RSSFeed",
    "RSSItem",
    "RSSEnclosure",
]
