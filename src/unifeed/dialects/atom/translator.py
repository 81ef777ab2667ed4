"""Translate AtomFeed into the canonical Feed."""

from unifeed.core.types import UNKNOWN_VERSION, Feed, FeedType, Image, Item
from unifeed.dialects.atom.types import AtomEntry, AtomFeed, AtomLink
from unifeed.dialects.base import copy_extensions, optional_text


def _alternate_href(links: list[AtomLink]) -> str:
    for link in links:
        if link.is_alternate and link.href:
            return link.href
    return ""


class DefaultAtomTranslator:
    """Default mapping from the Atom tree to the canonical model."""

    def translate(self, feed: AtomFeed) -> Feed:
        return Feed(
            title=optional_text(feed.title),
            items=[self.translate_entry(entry) for entry in feed.entries],
            language=optional_text(feed.language),
            version=feed.version or UNKNOWN_VERSION,
            link=optional_text(_alternate_href(feed.links)),
            description=optional_text(feed.subtitle),
            feed_type=FeedType.ATOM,
            extensions=copy_extensions(feed.extensions),
        )

    def translate_entry(self, entry: AtomEntry) -> Item:
        if entry.published:
            pub_date, pub_date_parsed = entry.published, entry.published_parsed
        else:
            pub_date, pub_date_parsed = entry.updated, entry.updated_parsed

        return Item(
            title=entry.title.strip(),
            link=_alternate_href(entry.links),
            description=entry.summary.strip(),
            guid=entry.id.strip(),
            image=self.translate_image(entry),
            pub_date=pub_date,
            pub_date_parsed=pub_date_parsed,
            extensions=copy_extensions(entry.extensions),
        )

    def translate_image(self, entry: AtomEntry) -> Image | None:
        """Use the first image enclosure link as the item image."""
        for link in entry.links:
            if link.rel == "enclosure" and link.href and link.type.startswith("image/"):
                return Image(link=link.href)
        return None
