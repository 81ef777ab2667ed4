"""Atom dialect tree (Atom 1.0 and 0.3)."""

from dataclasses import dataclass, field
from datetime import datetime

from unifeed.core.types import Extensions

ATOM10_NAMESPACE = "http://www.w3.org/2005/Atom"
ATOM03_NAMESPACE = "http://purl.org/atom/ns#"


@dataclass
class AtomLink:
    """A ``<link>`` element."""
    href: str = ""
    rel: str = ""
    type: str = ""

    @property
    def is_alternate(self) -> bool:
        return self.rel in ("", "alternate")


@dataclass
class AtomEntry:
    """An ``<entry>``."""
    title: str = ""
    summary: str = ""
    id: str = ""
    links: list[AtomLink] = field(default_factory=list)
    published: str = ""
    updated: str = ""
    published_parsed: datetime | None = None
    updated_parsed: datetime | None = None
    extensions: Extensions | None = None


@dataclass
class AtomFeed:
    """A ``<feed>`` document."""
    title: str = ""
    subtitle: str = ""
    language: str = ""
    version: str = ""
    links: list[AtomLink] = field(default_factory=list)
    entries: list[AtomEntry] = field(default_factory=list)
    extensions: Extensions | None = None
