"""Sitemap dialect tree.

Mirrors the XML sitemap protocol with the Google News and Image
extensions folded in.
"""

from dataclasses import dataclass, field
from datetime import datetime

from unifeed.core.types import Extensions

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
NEWS_NAMESPACE = "http://www.google.com/schemas/sitemap-news/0.9"
IMAGE_NAMESPACE = "http://www.google.com/schemas/sitemap-image/1.1"

# Feed-level fallbacks, spelled as existing consumers expect them
UNKNOWN_TITLE = "unkonow"
UNKNOWN_LANGUAGE = "unknow"


@dataclass
class SitemapImage:
    """An ``<image:image>`` entry."""
    link: str = ""


@dataclass
class SitemapItem:
    """A ``<url>`` entry."""
    title: str = ""
    link: str = ""
    image: SitemapImage | None = None
    pub_date: str = ""
    pub_date_parsed: datetime | None = None
    extensions: Extensions | None = None


@dataclass
class SitemapFeed:
    """A ``<urlset>`` document."""
    title: str | None = None
    items: list[SitemapItem] = field(default_factory=list)
    language: str | None = None
    version: str = ""
    extensions: Extensions | None = None


@dataclass
class News:
    """Transient ``<news:news>`` record, redistributed into item and feed."""
    name: str = ""
    title: str = ""
    language: str = ""
    publication_date: str = ""


@dataclass(frozen=True)
class FeedHints:
    """Feed-level values bubbled up from an item's ``<news>`` element."""
    title: str = ""
    language: str = ""
