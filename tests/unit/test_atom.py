"""Tests for the Atom extractor and translator."""

import io
from datetime import datetime, timezone

import pytest

from unifeed.core.exceptions import StructureError
from unifeed.core.types import FeedType
from unifeed.dialects.atom import AtomParser, DefaultAtomTranslator

ATOM_03 = """<feed version="0.3" xmlns="http://purl.org/atom/ns#">
  <title>Legacy Atom</title>
  <tagline>Old school</tagline>
  <link rel="alternate" type="text/html" href="https://example.org/"/>
  <entry>
    <title>Old entry</title>
    <link rel="alternate" href="https://example.org/old"/>
    <issued>2004-05-06T07:08:09Z</issued>
    <modified>2004-05-07T00:00:00Z</modified>
  </entry>
</feed>
"""


def parse(document: str):
    return AtomParser(chunk_size=64).parse(io.BytesIO(document.encode("utf-8")))


class TestAtomParser:
    """Tests for AtomParser."""

    def test_atom_10(self, atom_feed):
        """Test a typical Atom 1.0 feed."""
        feed = parse(atom_feed)

        assert feed.version == "1.0"
        assert feed.title == "Example Atom"
        assert feed.subtitle == "Updates"
        assert feed.language == "fr"
        assert [(link.rel, link.href) for link in feed.links] == [
            ("self", "https://example.com/feed.atom"),
            ("", "https://example.com/"),
        ]

    def test_entry(self, atom_feed):
        """Test entry fields and links."""
        entry = parse(atom_feed).entries[0]

        assert entry.title == "Atom entry"
        assert entry.id == "urn:uuid:1225c695"
        assert entry.summary == "Short summary"
        assert entry.published == ""
        assert entry.updated_parsed == datetime(2024, 1, 5, 11, 0, tzinfo=timezone.utc)
        assert entry.links[1].type == "image/jpeg"

    def test_atom_03(self):
        """Test Atom 0.3 element names."""
        feed = parse(ATOM_03)

        assert feed.version == "0.3"
        assert feed.subtitle == "Old school"
        entry = feed.entries[0]
        assert entry.published == "2004-05-06T07:08:09Z"
        assert entry.updated == "2004-05-07T00:00:00Z"

    def test_unknown_namespace_version(self):
        """Test a feed root outside the Atom namespaces."""
        assert parse("<feed><title>t</title></feed>").version == "unknown"

    def test_foreign_default_namespace(self):
        """Test that unprefixed children are parsed whatever the default namespace."""
        feed = parse(
            '<feed xmlns="http://example.com/not-atom">'
            "<title>t</title><entry><title>e</title></entry></feed>"
        )

        assert feed.version == "unknown"
        assert feed.title == "t"
        assert [entry.title for entry in feed.entries] == ["e"]
        assert feed.extensions is None

    def test_extensions(self):
        """Test that foreign elements land in extensions."""
        feed = parse(
            '<feed xmlns="http://www.w3.org/2005/Atom" '
            'xmlns:media="http://search.yahoo.com/mrss/">'
            '<entry><title>e</title><media:thumbnail url="https://a/t.jpg"/></entry>'
            "</feed>"
        )
        thumbnail = feed.entries[0].extensions["media"]["thumbnail"][0]
        assert thumbnail.attrs == {"url": "https://a/t.jpg"}
        assert feed.extensions is None

    @pytest.mark.parametrize(
        "document",
        [
            "<rss/>",
            '<feed xmlns="http://www.w3.org/2005/Atom"><entry></feed>',
        ],
    )
    def test_structure_errors(self, document):
        """Test that wrong roots and broken documents are fatal."""
        with pytest.raises(StructureError):
            parse(document)


class TestDefaultAtomTranslator:
    """Tests for DefaultAtomTranslator."""

    def test_translate(self, atom_feed):
        """Test mapping onto the canonical feed."""
        feed = DefaultAtomTranslator().translate(parse(atom_feed))

        assert feed.feed_type is FeedType.ATOM
        assert feed.link == "https://example.com/"
        assert feed.description == "Updates"
        assert feed.language == "fr"

        item = feed.items[0]
        assert item.link == "https://example.com/entry"
        assert item.guid == "urn:uuid:1225c695"
        assert item.description == "Short summary"
        assert item.image.link == "https://example.com/entry.jpg"
        assert item.pub_date == "2024-01-05T12:00:00+01:00"
        assert item.pub_date_parsed == datetime(2024, 1, 5, 11, 0, tzinfo=timezone.utc)

    def test_published_preferred_over_updated(self):
        """Test that the published date wins when both are present."""
        feed = DefaultAtomTranslator().translate(parse(ATOM_03))
        item = feed.items[0]

        assert item.pub_date == "2004-05-06T07:08:09Z"
        assert item.pub_date_parsed == datetime(2004, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
        assert item.link == "https://example.org/old"
