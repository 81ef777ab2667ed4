"""Tests for the FeedParser orchestrator."""

import io

import httpx
import pytest

from unifeed.acquire.fetcher import FeedFetcher
from unifeed.core.exceptions import ExtensionError, HTTPError, StructureError, UnknownFeedTypeError
from unifeed.core.types import Feed, FeedType, Item
from unifeed.parser import FeedParser


def fetcher_for(settings, handler) -> FeedFetcher:
    return FeedFetcher(settings, client=httpx.Client(transport=httpx.MockTransport(handler)))


class RecordingTranslator:
    """Translator stub that remembers what it was given."""

    def __init__(self):
        self.seen = []

    def translate(self, feed):
        self.seen.append(feed)
        return Feed(title="custom", items=[Item(link="x")])


class TestFeedParser:
    """Tests for FeedParser."""

    @pytest.mark.parametrize(
        "fixture, feed_type, count",
        [
            ("news_sitemap", FeedType.SITEMAP, 2),
            ("rss_feed", FeedType.RSS, 2),
            ("atom_feed", FeedType.ATOM, 1),
        ],
    )
    def test_dispatch(self, request, settings, fixture, feed_type, count):
        """Test that each dialect is routed to its own extractor."""
        document = request.getfixturevalue(fixture)
        feed = FeedParser(settings=settings).parse_string(document)

        assert feed.feed_type is feed_type
        assert len(feed.items) == count

    def test_scenario_minimal_sitemap(self, settings):
        """Test the one-url sitemap end to end."""
        feed = FeedParser(settings=settings).parse_string(
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
            "<url><loc>http://a/</loc></url></urlset>"
        )

        assert feed.version == "0.9"
        assert [item.link for item in feed.items] == ["http://a/"]

    @pytest.mark.parametrize(
        "namespace",
        [
            "https://www.sitemaps.org/schemas/sitemap/0.9",
            "http://www.google.com/schemas/sitemap/0.84",
        ],
    )
    def test_sitemap_with_other_namespace(self, settings, namespace):
        """Test that sitemaps in other schema namespaces keep their urls."""
        feed = FeedParser(settings=settings).parse_string(
            f'<urlset xmlns="{namespace}">'
            "<url><loc>http://a/</loc></url><url><loc>http://b/</loc></url></urlset>"
        )

        assert feed.version == "unknown"
        assert [item.link for item in feed.items] == ["http://a/", "http://b/"]
        assert feed.extensions is None

    def test_unknown_root(self, settings):
        """Test that an unrecognised root fails the parse."""
        with pytest.raises(UnknownFeedTypeError):
            FeedParser(settings=settings).parse_string("<html><body/></html>")

    def test_empty_document(self, settings):
        """Test that an empty document is an unknown feed type."""
        with pytest.raises(UnknownFeedTypeError):
            FeedParser(settings=settings).parse_bytes(b"")

    def test_structure_error_propagates(self, settings):
        """Test that a broken document after a known root is a structure error."""
        with pytest.raises(StructureError):
            FeedParser(settings=settings).parse_string(
                "<urlset><url><loc>a</loc></url>"
            )

    def test_replays_detected_bytes(self, settings, news_sitemap):
        """Test that bytes consumed by detection reach the extractor."""
        # Pad the prolog past several read chunks
        document = news_sitemap.replace(
            "<!-- generated by the CMS -->", "<!-- " + "x" * 500 + " -->"
        )
        feed = FeedParser(settings=settings).parse(io.BytesIO(document.encode("utf-8")))

        assert len(feed.items) == 2
        assert feed.title == "The Example Times"

    def test_text_stream(self, settings, rss_feed):
        """Test parsing from a text stream."""
        feed = FeedParser(settings=settings).parse(io.StringIO(rss_feed.split("\n", 1)[1]))
        assert feed.title == "Example News"

    def test_deterministic(self, settings, news_sitemap):
        """Test that the same bytes give structurally equal feeds."""
        parser = FeedParser(settings=settings)
        assert parser.parse_string(news_sitemap) == parser.parse_string(news_sitemap)

    def test_custom_translator(self, settings, news_sitemap):
        """Test that injected translators are used."""
        translator = RecordingTranslator()
        parser = FeedParser(sitemap_translator=translator, settings=settings)

        feed = parser.parse_string(news_sitemap)

        assert feed.title == "custom"
        assert len(translator.seen) == 1
        assert translator.seen[0].version == "0.9"

    def test_custom_extension_parser(self, settings, rss_feed):
        """Test that an injected extension parser is shared by the dialects."""

        class Exploding:
            def recognizes(self, namespace):
                return namespace == "http://purl.org/dc/elements/1.1/"

            def parse(self, cursor, extensions):
                raise RuntimeError("boom")

        parser = FeedParser(extensions=Exploding(), settings=settings)

        with pytest.raises(ExtensionError):
            parser.parse_string(rss_feed)

    def test_parse_url(self, settings, atom_feed):
        """Test fetching and parsing a URL."""
        fetcher = fetcher_for(
            settings,
            lambda request: httpx.Response(200, content=atom_feed.encode("utf-8")),
        )
        feed = FeedParser(fetcher=fetcher, settings=settings).parse_url(
            "https://example.com/feed.atom"
        )

        assert feed.feed_type is FeedType.ATOM
        assert feed.title == "Example Atom"

    def test_parse_url_http_error(self, settings):
        """Test that HTTP failures surface with their status."""
        fetcher = fetcher_for(settings, lambda request: httpx.Response(404))

        with pytest.raises(HTTPError) as exc_info:
            FeedParser(fetcher=fetcher, settings=settings).parse_url("https://example.com/x")

        assert exc_info.value.status_code == 404

    def test_parse_url_with_proxy(self, settings, monkeypatch):
        """Test that proxy details are handed to the fetcher."""
        calls = []

        def fake_fetch(url, proxy=None, proxy_username=None, proxy_password=None):
            calls.append((url, proxy, proxy_username, proxy_password))
            return b"<rss version='2.0'><channel><title>p</title></channel></rss>"

        parser = FeedParser(settings=settings)
        monkeypatch.setattr(parser.fetcher, "fetch", fake_fetch)

        feed = parser.parse_url_with_proxy("https://example.com/rss", "10.0.0.1:3128", "u", "p")

        assert feed.title == "p"
        assert calls == [("https://example.com/rss", "10.0.0.1:3128", "u", "p")]
