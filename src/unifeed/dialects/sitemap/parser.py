"""Streaming extractor for XML sitemaps.

Walks a ``<urlset>`` document and builds a SitemapFeed. Google News
sitemaps carry the publication name and language on every ``<url>``;
those are bubbled up to the feed from the first item that has them.
"""

from dataclasses import dataclass

from unifeed.core.logging import get_logger
from unifeed.core.types import UNKNOWN_VERSION
from unifeed.dialects.base import DialectParser, text_field
from unifeed.dialects.sitemap.types import (
    IMAGE_NAMESPACE,
    NEWS_NAMESPACE,
    SITEMAP_NAMESPACE,
    UNKNOWN_LANGUAGE,
    UNKNOWN_TITLE,
    FeedHints,
    News,
    SitemapFeed,
    SitemapImage,
    SitemapItem,
)
from unifeed.parsing.cursor import Cursor, Token

logger = get_logger(__name__)


@dataclass
class _UrlState:
    item: SitemapItem
    hints: FeedHints | None = None


def _adopt_hints(feed: SitemapFeed, hints: FeedHints | None) -> None:
    """Fill feed title and language from an item until a real value is found."""
    if feed.title is None or feed.title == UNKNOWN_TITLE:
        feed.title = (hints.title if hints else "") or UNKNOWN_TITLE
    if feed.language is None or feed.language == UNKNOWN_LANGUAGE:
        feed.language = (hints.language if hints else "") or UNKNOWN_LANGUAGE


def _urlset_url(parser: "SitemapParser", cursor: Cursor, feed: SitemapFeed) -> None:
    item, hints = parser._parse_item(cursor)
    feed.items.append(item)
    _adopt_hints(feed, hints)


def _url_loc(parser: "SitemapParser", cursor: Cursor, state: _UrlState) -> None:
    # First non-empty <loc> wins
    if state.item.link:
        cursor.skip()
    else:
        state.item.link = cursor.read_text()


def _url_news(parser: "SitemapParser", cursor: Cursor, state: _UrlState) -> None:
    news = parser._parse_news(cursor)
    item = state.item
    item.title = news.title
    item.pub_date = news.publication_date
    item.pub_date_parsed = parser._parse_date(news.publication_date)
    state.hints = FeedHints(title=news.name, language=news.language)


def _url_image(parser: "SitemapParser", cursor: Cursor, state: _UrlState) -> None:
    state.item.image = parser._parse_image(cursor)


def _news_publication(parser: "SitemapParser", cursor: Cursor, news: News) -> None:
    cursor.expect(Token.START, "publication")
    parser._walk(cursor, _PUBLICATION_HANDLERS, news)
    cursor.expect(Token.END, "publication")


_URLSET_HANDLERS = {"url": _urlset_url}

_URL_HANDLERS = {
    "loc": _url_loc,
    "news": _url_news,
    "image": _url_image,
}

_NEWS_HANDLERS = {
    "publication": _news_publication,
    "publication_date": text_field("publication_date"),
    "title": text_field("title"),
}

_PUBLICATION_HANDLERS = {
    "name": text_field("name"),
    "language": text_field("language"),
}

_IMAGE_HANDLERS = {"loc": text_field("link")}


class SitemapParser(DialectParser[SitemapFeed]):
    """Parse XML sitemaps into SitemapFeed objects.

    Example:
        >>> parser = SitemapParser()
        >>> feed = parser.parse(open("sitemap.xml", "rb"))
        >>> for item in feed.items:
        ...     print(item.link)
    """

    BASE_NAMESPACES = frozenset({SITEMAP_NAMESPACE, NEWS_NAMESPACE, IMAGE_NAMESPACE})

    def _parse_root(self, cursor: Cursor) -> SitemapFeed:
        cursor.expect(Token.START, "urlset")
        feed = SitemapFeed(version=self._parse_version(cursor))

        extensions = self._walk(cursor, _URLSET_HANDLERS, feed, extensions={})

        cursor.expect(Token.END, "urlset")
        if extensions:
            feed.extensions = extensions

        logger.debug(f"Extracted {len(feed.items)} URLs from sitemap {feed.version}")
        return feed

    def _parse_version(self, cursor: Cursor) -> str:
        if cursor.attribute("xmlns") == SITEMAP_NAMESPACE:
            return "0.9"
        return UNKNOWN_VERSION

    def _parse_item(self, cursor: Cursor) -> tuple[SitemapItem, FeedHints | None]:
        """Parse one ``<url>``.

        Returns:
            The item and the feed hints from its ``<news>``, if any
        """
        cursor.expect(Token.START, "url")
        state = _UrlState(SitemapItem())

        extensions = self._walk(cursor, _URL_HANDLERS, state, extensions={})

        cursor.expect(Token.END, "url")
        if extensions:
            state.item.extensions = extensions
        return state.item, state.hints

    def _parse_news(self, cursor: Cursor) -> News:
        cursor.expect(Token.START, "news")
        news = News()
        self._walk(cursor, _NEWS_HANDLERS, news)
        cursor.expect(Token.END, "news")
        return news

    def _parse_image(self, cursor: Cursor) -> SitemapImage:
        cursor.expect(Token.START, "image")
        image = SitemapImage()
        self._walk(cursor, _IMAGE_HANDLERS, image)
        cursor.expect(Token.END, "image")
        return image
