"""Streaming extractor for RSS feeds.

Handles both families:
- ``<rss version="...">`` with a single ``<channel>`` holding the items
- ``<rdf:RDF>`` (RSS 0.9 and 1.0) where channel, items and image are siblings
"""

from unifeed.core.exceptions import StructureError
from unifeed.core.logging import get_logger
from unifeed.core.types import UNKNOWN_VERSION
from unifeed.dialects.base import DialectParser, first_text_field, text_field
from unifeed.dialects.rss.types import (
    RDF_NAMESPACE,
    RSS090_NAMESPACE,
    RSS10_NAMESPACE,
    RSSEnclosure,
    RSSFeed,
    RSSItem,
)
from unifeed.parsing.cursor import Cursor, Token
from unifeed.parsing.extensions import first_value

logger = get_logger(__name__)


def _feed_channel(parser: "RSSParser", cursor: Cursor, feed: RSSFeed) -> None:
    cursor.expect(Token.START, "channel")
    extensions = parser._walk(cursor, _CHANNEL_HANDLERS, feed, extensions={})
    cursor.expect(Token.END, "channel")

    if extensions:
        feed.extensions = extensions
        # RSS 1.0 channels usually carry their language as dc:language
        if not feed.language:
            feed.language = first_value(extensions, "dc", "language")


def _feed_item(parser: "RSSParser", cursor: Cursor, feed: RSSFeed) -> None:
    feed.items.append(parser._parse_item(cursor))


def _item_enclosure(parser: "RSSParser", cursor: Cursor, item: RSSItem) -> None:
    item.enclosure = RSSEnclosure(
        url=cursor.attribute("url").strip(),
        type=cursor.attribute("type").strip(),
        length=cursor.attribute("length").strip(),
    )
    cursor.skip()


_RSS_HANDLERS = {"channel": _feed_channel}

_RDF_HANDLERS = {
    "channel": _feed_channel,
    "item": _feed_item,
}

_CHANNEL_HANDLERS = {
    "title": text_field("title"),
    "link": first_text_field("link"),
    "description": text_field("description"),
    "language": text_field("language"),
    "item": _feed_item,
}

_ITEM_HANDLERS = {
    "title": text_field("title"),
    "link": first_text_field("link"),
    "description": text_field("description"),
    "guid": text_field("guid"),
    "pubdate": text_field("pub_date"),
    "enclosure": _item_enclosure,
}


class RSSParser(DialectParser[RSSFeed]):
    """Parse RSS and RDF documents into RSSFeed objects."""

    BASE_NAMESPACES = frozenset({RSS10_NAMESPACE, RSS090_NAMESPACE, RDF_NAMESPACE})

    def _parse_root(self, cursor: Cursor) -> RSSFeed:
        root = cursor.name.lower()
        if root == "rss":
            feed = self._parse_rss(cursor)
        elif root == "rdf":
            feed = self._parse_rdf(cursor)
        else:
            raise StructureError(
                f"expected an <rss> or <rdf> root, found <{cursor.name}>",
                expected="rss",
                found=cursor.name,
            )

        logger.debug(f"Extracted {len(feed.items)} items from RSS {feed.version}")
        return feed

    def _parse_rss(self, cursor: Cursor) -> RSSFeed:
        cursor.expect(Token.START, "rss")
        feed = RSSFeed(version=cursor.attribute("version").strip() or UNKNOWN_VERSION)
        self._walk(cursor, _RSS_HANDLERS, feed)
        cursor.expect(Token.END, "rss")
        return feed

    def _parse_rdf(self, cursor: Cursor) -> RSSFeed:
        cursor.expect(Token.START, "rdf")
        if cursor.attribute("xmlns") == RSS090_NAMESPACE:
            feed = RSSFeed(version="0.9")
        else:
            feed = RSSFeed(version="1.0")
        self._walk(cursor, _RDF_HANDLERS, feed)
        cursor.expect(Token.END, "rdf")
        return feed

    def _parse_item(self, cursor: Cursor) -> RSSItem:
        cursor.expect(Token.START, "item")
        item = RSSItem()

        extensions = self._walk(cursor, _ITEM_HANDLERS, item, extensions={})

        cursor.expect(Token.END, "item")
        if extensions:
            item.extensions = extensions
            if not item.pub_date:
                item.pub_date = first_value(extensions, "dc", "date")

        item.pub_date_parsed = self._parse_date(item.pub_date)
        return item
