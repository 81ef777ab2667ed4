"""Core data types for Unifeed.

This module defines the canonical, dialect-neutral feed model:
- FeedType: The dialects a document can be detected as
- Feed: A normalized feed with its items
- Item: A single entry (RSS item, Atom entry, Sitemap url)
- Image: An image owned by an item
- Extension: A namespaced element outside a dialect's base schema
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

UNKNOWN_VERSION = "unknown"


class FeedType(str, Enum):
    """Feed dialects recognised by the detector."""

    UNKNOWN = "unknown"
    ATOM = "atom"
    RSS = "rss"
    SITEMAP = "sitemap"


@dataclass
class Extension:
    """A namespaced element outside a dialect's base schema.

    Attributes:
        name: Local name of the element
        value: Trimmed text content
        attrs: Attributes keyed by local name
        children: Child elements keyed by local name
    """
    name: str
    value: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    children: dict[str, list["Extension"]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert extension to dictionary, omitting empty fields."""
        data: dict[str, Any] = {"name": self.name}
        if self.value:
            data["value"] = self.value
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        if self.children:
            data["children"] = {
                name: [child.to_dict() for child in elements]
                for name, elements in self.children.items()
            }
        return data


# prefix -> element name -> occurrences
Extensions = dict[str, dict[str, list[Extension]]]


def extensions_to_dict(extensions: Extensions | None) -> dict[str, Any]:
    """Serialize an extensions mapping."""
    if not extensions:
        return {}
    return {
        prefix: {
            name: [ext.to_dict() for ext in elements]
            for name, elements in names.items()
        }
        for prefix, names in extensions.items()
    }


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value}


@dataclass
class Image:
    """An image attached to an item."""
    link: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact({"link": self.link})


@dataclass
class Item:
    """A single feed entry.

    Attributes:
        title: Entry title, empty when the source has none
        link: Entry URL; first non-empty occurrence in the source wins
        description: Summary text, empty when absent
        guid: Stable identifier (RSS guid, Atom id), empty when absent
        image: Image owned by this item
        pub_date: Publication date exactly as written in the source
        pub_date_parsed: pub_date normalized to UTC, None if unparseable
        extensions: Extension elements, None unless at least one was seen
    """
    title: str = ""
    link: str = ""
    description: str = ""
    guid: str = ""
    image: Image | None = None
    pub_date: str = ""
    pub_date_parsed: datetime | None = None
    extensions: Extensions | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert item to dictionary, omitting empty fields."""
        return _compact({
            "title": self.title,
            "link": self.link,
            "description": self.description,
            "guid": self.guid,
            "image": self.image.to_dict() if self.image else None,
            "pubDate": self.pub_date,
            "pubDateParsed": (
                self.pub_date_parsed.isoformat() if self.pub_date_parsed else None
            ),
            "extensions": extensions_to_dict(self.extensions),
        })


@dataclass
class Feed:
    """A feed normalized from any supported dialect.

    Attributes:
        title: Feed title
        items: Items in document order
        language: Feed language
        version: Dialect version, "unknown" when it cannot be determined
        link: Feed home page
        description: Feed description or subtitle
        feed_type: The dialect the feed was parsed from
        extensions: Feed-level extension elements
    """
    title: str | None = None
    items: list[Item] = field(default_factory=list)
    language: str | None = None
    version: str = UNKNOWN_VERSION
    link: str | None = None
    description: str | None = None
    feed_type: FeedType = FeedType.UNKNOWN
    extensions: Extensions | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert feed to dictionary, omitting empty fields."""
        return _compact({
            "title": self.title,
            "link": self.link,
            "description": self.description,
            "items": [item.to_dict() for item in self.items],
            "language": self.language,
            "version": self.version,
            "feedType": self.feed_type.value,
            "extensions": extensions_to_dict(self.extensions),
        })

    def to_json(self, indent: int | None = 4) -> str:
        """Serialize the feed as JSON."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def __str__(self) -> str:
        return self.to_json()
