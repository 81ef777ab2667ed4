"""Streaming extractor for Atom feeds."""

from unifeed.core.logging import get_logger
from unifeed.core.types import UNKNOWN_VERSION
from unifeed.dialects.atom.types import (
    ATOM03_NAMESPACE,
    ATOM10_NAMESPACE,
    AtomEntry,
    AtomFeed,
    AtomLink,
)
from unifeed.dialects.base import DialectParser, text_field
from unifeed.parsing.cursor import Cursor, Token

logger = get_logger(__name__)

_VERSIONS = {
    ATOM10_NAMESPACE: "1.0",
    ATOM03_NAMESPACE: "0.3",
}


def _append_link(parser: "AtomParser", cursor: Cursor, target: AtomFeed | AtomEntry) -> None:
    target.links.append(
        AtomLink(
            href=cursor.attribute("href").strip(),
            rel=cursor.attribute("rel").strip().lower(),
            type=cursor.attribute("type").strip(),
        )
    )
    cursor.skip()


def _feed_entry(parser: "AtomParser", cursor: Cursor, feed: AtomFeed) -> None:
    feed.entries.append(parser._parse_entry(cursor))


_FEED_HANDLERS = {
    "title": text_field("title"),
    "subtitle": text_field("subtitle"),
    "tagline": text_field("subtitle"),
    "link": _append_link,
    "entry": _feed_entry,
}

_ENTRY_HANDLERS = {
    "title": text_field("title"),
    "summary": text_field("summary"),
    "id": text_field("id"),
    "link": _append_link,
    "issued": text_field("published"),
    "modified": text_field("updated"),
    "published": text_field("published"),
    "updated": text_field("updated"),
}


class AtomParser(DialectParser[AtomFeed]):
    """Parse Atom documents into AtomFeed objects."""

    BASE_NAMESPACES = frozenset(_VERSIONS)

    def _parse_root(self, cursor: Cursor) -> AtomFeed:
        cursor.expect(Token.START, "feed")
        feed = AtomFeed(
            version=_VERSIONS.get(cursor.namespace, UNKNOWN_VERSION),
            language=cursor.attribute("xml:lang").strip(),
        )

        extensions = self._walk(cursor, _FEED_HANDLERS, feed, extensions={})

        cursor.expect(Token.END, "feed")
        if extensions:
            feed.extensions = extensions

        logger.debug(f"Extracted {len(feed.entries)} entries from Atom {feed.version}")
        return feed

    def _parse_entry(self, cursor: Cursor) -> AtomEntry:
        cursor.expect(Token.START, "entry")
        entry = AtomEntry()

        extensions = self._walk(cursor, _ENTRY_HANDLERS, entry, extensions={})

        cursor.expect(Token.END, "entry")
        if extensions:
            entry.extensions = extensions
        entry.published_parsed = self._parse_date(entry.published)
        entry.updated_parsed = self._parse_date(entry.updated)
        return entry
