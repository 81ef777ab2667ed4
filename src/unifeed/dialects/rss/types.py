"""RSS dialect tree (RSS 0.9x/2.0 and RDF-based RSS 0.9/1.0)."""

from dataclasses import dataclass, field
from datetime import datetime

from unifeed.core.types import Extensions

RSS10_NAMESPACE = "http://purl.org/rss/1.0/"
RSS090_NAMESPACE = "http://my.netscape.com/rdf/simple/0.9/"
RDF_NAMESPACE = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"


@dataclass
class RSSEnclosure:
    """An ``<enclosure>`` attached to an item."""
    url: str = ""
    type: str = ""
    length: str = ""


@dataclass
class RSSItem:
    """An ``<item>``."""
    title: str = ""
    link: str = ""
    description: str = ""
    guid: str = ""
    pub_date: str = ""
    pub_date_parsed: datetime | None = None
    enclosure: RSSEnclosure | None = None
    extensions: Extensions | None = None


@dataclass
class RSSFeed:
    """An RSS ``<channel>`` (or RDF document) with its items."""
    title: str = ""
    link: str = ""
    description: str = ""
    language: str = ""
    version: str = ""
    items: list[RSSItem] = field(default_factory=list)
    extensions: Extensions | None = None
