"""Translate RSSFeed into the canonical Feed."""

from unifeed.core.types import UNKNOWN_VERSION, Feed, FeedType, Image, Item
from unifeed.dialects.base import copy_extensions, optional_text
from unifeed.dialects.rss.types import RSSFeed, RSSItem


class DefaultRSSTranslator:
    """Default mapping from the RSS tree to the canonical model."""

    def translate(self, feed: RSSFeed) -> Feed:
        return Feed(
            title=optional_text(feed.title),
            items=[self.translate_item(item) for item in feed.items],
            language=optional_text(feed.language),
            version=feed.version or UNKNOWN_VERSION,
            link=optional_text(feed.link),
            description=optional_text(feed.description),
            feed_type=FeedType.RSS,
            extensions=copy_extensions(feed.extensions),
        )

    def translate_item(self, item: RSSItem) -> Item:
        return Item(
            title=item.title.strip(),
            link=item.link.strip(),
            description=item.description.strip(),
            guid=item.guid.strip(),
            image=self.translate_image(item),
            pub_date=item.pub_date,
            pub_date_parsed=item.pub_date_parsed,
            extensions=copy_extensions(item.extensions),
        )

    def translate_image(self, item: RSSItem) -> Image | None:
        """Use an image enclosure as the item image."""
        enclosure = item.enclosure
        if enclosure and enclosure.url and enclosure.type.startswith("image/"):
            return Image(link=enclosure.url)
        return None
