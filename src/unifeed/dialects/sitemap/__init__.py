"""XML sitemap dialect (sitemaps.org 0.9 with Google News and Image)."""

from unifeed.dialects.sitemap.parser import SitemapParser
from unifeed.dialects.sitemap.translator import DefaultSitemapTranslator
from unifeed.dialects.sitemap.types import (
    FeedHints,
    News,
    SitemapFeed,
    SitemapImage,
    SitemapItem,
)

__all__ = [
    "SitemapParser",
    "DefaultSitemapTranslator",
    "SitemapFeed",
    "SitemapItem",
    "SitemapImage",
    "News",
    "FeedHints",
]
