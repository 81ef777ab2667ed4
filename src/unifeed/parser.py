"""Universal feed parser.

FeedParser detects a document's dialect, runs the matching streaming
extractor and normalizes the result with the dialect's translator.

Example:
    >>> from unifeed import FeedParser
    >>> parser = FeedParser()
    >>> feed = parser.parse_url("https://example.com/news-sitemap.xml")
    >>> for item in feed.items:
    ...     print(item.link, item.pub_date_parsed)
"""

import io
from typing import IO, Any

from unifeed.acquire.fetcher import FeedFetcher
from unifeed.core.config import FeedSettings, get_settings
from unifeed.core.exceptions import UnknownFeedTypeError
from unifeed.core.logging import get_logger
from unifeed.core.types import Feed, FeedType
from unifeed.detector import detect_feed_type
from unifeed.dialects.atom import AtomParser, DefaultAtomTranslator
from unifeed.dialects.base import DialectParser, Translator
from unifeed.dialects.rss import DefaultRSSTranslator, RSSParser
from unifeed.dialects.sitemap import DefaultSitemapTranslator, SitemapParser
from unifeed.parsing.extensions import ExtensionParser
from unifeed.parsing.stream import RecordingReader

logger = get_logger(__name__)


class FeedParser:
    """Parse RSS, Atom and Sitemap documents into the canonical Feed.

    All collaborators are fixed at construction. The parser keeps no
    per-document state, so one instance can parse any number of
    documents one after another.

    Args:
        rss_translator: Translator for RSS/RDF documents
        atom_translator: Translator for Atom documents
        sitemap_translator: Translator for sitemaps
        extensions: Extension parser shared by all dialects. Defaults to
            each dialect's NamespaceExtensionParser.
        fetcher: HTTP fetcher used by the URL variants
        settings: Settings; defaults to the global settings
    """

    def __init__(
        self,
        rss_translator: Translator[Any] | None = None,
        atom_translator: Translator[Any] | None = None,
        sitemap_translator: Translator[Any] | None = None,
        extensions: ExtensionParser | None = None,
        fetcher: FeedFetcher | None = None,
        settings: FeedSettings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.fetcher = fetcher or FeedFetcher(self.settings)

        chunk_size = self.settings.read_chunk_size
        self._dialects: dict[FeedType, tuple[DialectParser[Any], Translator[Any]]] = {
            FeedType.RSS: (
                RSSParser(extensions, chunk_size),
                rss_translator or DefaultRSSTranslator(),
            ),
            FeedType.ATOM: (
                AtomParser(extensions, chunk_size),
                atom_translator or DefaultAtomTranslator(),
            ),
            FeedType.SITEMAP: (
                SitemapParser(extensions, chunk_size),
                sitemap_translator or DefaultSitemapTranslator(),
            ),
        }

    def parse(self, stream: IO[Any]) -> Feed:
        """Parse a feed document from a readable stream.

        Args:
            stream: Byte or text stream holding one XML document

        Returns:
            The normalized Feed

        Raises:
            UnknownFeedTypeError: If the root element matches no dialect
            StructureError: If the document is malformed
            ExtensionError: If an extension element cannot be parsed
        """
        recorder = RecordingReader(stream)
        feed_type = detect_feed_type(recorder, chunk_size=self.settings.read_chunk_size)
        logger.debug(f"Detected feed type: {feed_type.value}")

        if feed_type not in self._dialects:
            raise UnknownFeedTypeError("Failed to detect feed type")

        parser, translator = self._dialects[feed_type]
        dialect_feed = parser.parse(recorder.replay())
        feed = translator.translate(dialect_feed)

        logger.info(f"Parsed {feed_type.value} feed with {len(feed.items)} items")
        return feed

    def parse_string(self, document: str) -> Feed:
        """Parse a feed document held in a string."""
        return self.parse(io.StringIO(document))

    def parse_bytes(self, document: bytes) -> Feed:
        """Parse a feed document held in bytes; the XML declaration sets the encoding."""
        return self.parse(io.BytesIO(document))

    def parse_url(self, url: str) -> Feed:
        """Fetch ``url`` and parse the response body.

        Raises:
            HTTPError: If the server answers outside 2xx-3xx
            FetchError: On transport failures
        """
        return self.parse_bytes(self.fetcher.fetch(url))

    def parse_url_with_proxy(
        self,
        url: str,
        proxy: str,
        username: str | None = None,
        password: str | None = None,
    ) -> Feed:
        """Fetch ``url`` through a proxy and parse the response body.

        Args:
            url: Feed URL
            proxy: Proxy as ``host:port``
            username: Proxy basic-auth user
            password: Proxy basic-auth password
        """
        body = self.fetcher.fetch(
            url,
            proxy=proxy,
            proxy_username=username,
            proxy_password=password,
        )
        return self.parse_bytes(body)
