"""Dialect extractors and translators.

Each dialect ships:
- a streaming parser building a dialect-specific tree
- a default translator normalizing that tree into the canonical Feed
"""

from unifeed.dialects.atom import AtomParser, DefaultAtomTranslator
from unifeed.dialects.base import DialectParser, Translator
from unifeed.dialects.rss import DefaultRSSTranslator, RSSParser
from unifeed.dialects.sitemap import DefaultSitemapTranslator, SitemapParser

__all__ = [
    "DialectParser",
    "Translator",
    "AtomParser",
    "DefaultAtomTranslator",
    "RSSParser",
    "DefaultRSSTranslator",
    "SitemapParser",
    "DefaultSitemapTranslator",
]
