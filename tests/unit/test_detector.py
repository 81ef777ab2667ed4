"""Tests for feed type detection."""

import io

import pytest

from unifeed.core.types import FeedType
from unifeed.detector import detect_feed_type


def detect(document: str) -> FeedType:
    return detect_feed_type(io.BytesIO(document.encode("utf-8")))


class TestDetectFeedType:
    """Tests for detect_feed_type."""

    @pytest.mark.parametrize(
        "document, expected",
        [
            ('<rss version="2.0"><channel/></rss>', FeedType.RSS),
            (
                '<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"/>',
                FeedType.RSS,
            ),
            ('<feed xmlns="http://www.w3.org/2005/Atom"/>', FeedType.ATOM),
            (
                '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"/>',
                FeedType.SITEMAP,
            ),
            ("<URLSET/>", FeedType.SITEMAP),
            ("<html><body/></html>", FeedType.UNKNOWN),
            ("<sitemapindex/>", FeedType.UNKNOWN),
        ],
    )
    def test_root_elements(self, document, expected):
        """Test classification by root element."""
        assert detect(document) == expected

    def test_prolog_is_skipped(self):
        """Test that declaration, comments and whitespace are ignored."""
        document = '<?xml version="1.0"?>\n<!-- feed -->\n\n  <feed/>'
        assert detect(document) is FeedType.ATOM

    @pytest.mark.parametrize("document", ["", "   ", "not xml at all", "<<<>"])
    def test_malformed_input_is_unknown(self, document):
        """Test that detection never raises."""
        assert detect(document) is FeedType.UNKNOWN

    def test_unreadable_stream_is_unknown(self):
        """Test that read errors yield UNKNOWN."""

        class Broken:
            def read(self, size=-1):
                raise OSError("connection reset")

        assert detect_feed_type(Broken()) is FeedType.UNKNOWN

    def test_malformed_after_root_still_detected(self):
        """Test that errors after the root start tag do not hide the root."""
        assert detect("<rss><channel></rss>") is FeedType.RSS
