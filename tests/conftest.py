"""Pytest configuration and fixtures for Unifeed tests."""

import logging

import pytest

from unifeed.core.config import FeedSettings


@pytest.fixture
def settings() -> FeedSettings:
    """Settings with a tiny read size so documents span many parser feeds."""
    return FeedSettings(read_chunk_size=64, log_level="WARNING")


@pytest.fixture
def news_sitemap() -> str:
    """A Google News sitemap with images and an extension element."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<!-- generated by the CMS -->
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"
        xmlns:news="http://www.google.com/schemas/sitemap-news/0.9"
        xmlns:image="http://www.google.com/schemas/sitemap-image/1.1"
        xmlns:video="http://www.google.com/schemas/sitemap-video/1.1">
  <url>
    <loc>https://example.com/business/article55.html</loc>
    <news:news>
      <news:publication>
        <news:name>The Example Times</news:name>
        <news:language>en</news:language>
      </news:publication>
      <news:publication_date>2024-01-02T00:00:00Z</news:publication_date>
      <news:title>Companies A, B in Merger Talks</news:title>
    </news:news>
    <image:image>
      <image:loc>https://example.com/image.jpg</image:loc>
      <image:caption>Boardroom</image:caption>
    </image:image>
  </url>
  <url>
    <loc>https://example.com/sports/article56.html</loc>
    <lastmod>2024-01-03</lastmod>
    <video:video>
      <video:title>Match highlights</video:title>
      <video:player_loc allow_embed="yes">https://example.com/player?v=56</video:player_loc>
    </video:video>
  </url>
</urlset>
"""


@pytest.fixture
def rss_feed() -> str:
    """An RSS 2.0 feed with Dublin Core and an image enclosure."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Example News</title>
    <link>https://example.com/</link>
    <description>All the news</description>
    <language>en-us</language>
    <item>
      <title>First post</title>
      <link>https://example.com/first</link>
      <description>Hello</description>
      <guid>first</guid>
      <pubDate>Tue, 02 Jan 2024 10:00:00 +0200</pubDate>
      <enclosure url="https://example.com/first.png" type="image/png" length="123"/>
    </item>
    <item>
      <title>Second post</title>
      <link>https://example.com/second</link>
      <dc:creator>Jane</dc:creator>
      <dc:date>2024-01-03T08:30:00Z</dc:date>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def atom_feed() -> str:
    """An Atom 1.0 feed."""
    return """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xml:lang="fr">
  <title>Example Atom</title>
  <subtitle>Updates</subtitle>
  <link href="https://example.com/feed.atom" rel="self"/>
  <link href="https://example.com/"/>
  <entry>
    <title>Atom entry</title>
    <id>urn:uuid:1225c695</id>
    <link rel="alternate" href="https://example.com/entry"/>
    <link rel="enclosure" type="image/jpeg" href="https://example.com/entry.jpg"/>
    <updated>2024-01-05T12:00:00+01:00</updated>
    <summary>Short summary</summary>
  </entry>
</feed>
"""


@pytest.fixture
def package_logger():
    """The package logger, restored to its previous handlers and level afterwards."""
    logger = logging.getLogger("unifeed")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]
