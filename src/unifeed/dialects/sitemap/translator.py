"""Translate SitemapFeed into the canonical Feed."""

from unifeed.core.types import UNKNOWN_VERSION, Feed, FeedType, Image, Item
from unifeed.dialects.base import copy_extensions, optional_text
from unifeed.dialects.sitemap.types import SitemapFeed, SitemapImage, SitemapItem


class DefaultSitemapTranslator:
    """Default mapping from the sitemap tree to the canonical model."""

    def translate(self, feed: SitemapFeed) -> Feed:
        return Feed(
            title=optional_text(feed.title),
            items=[self.translate_item(item) for item in feed.items],
            language=optional_text(feed.language),
            version=feed.version or UNKNOWN_VERSION,
            feed_type=FeedType.SITEMAP,
            extensions=copy_extensions(feed.extensions),
        )

    def translate_item(self, item: SitemapItem) -> Item:
        return Item(
            title=item.title.strip(),
            link=item.link.strip(),
            image=self.translate_image(item.image),
            pub_date=item.pub_date,
            pub_date_parsed=item.pub_date_parsed,
            extensions=copy_extensions(item.extensions),
        )

    def translate_image(self, image: SitemapImage | None) -> Image | None:
        if image is None:
            return None
        return Image(link=image.link.strip())
