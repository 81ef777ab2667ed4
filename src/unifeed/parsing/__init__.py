"""XML reading primitives shared by every dialect.

This module provides:
- Cursor: forward-only pull tokenizer over a byte or text stream
- RecordingReader / ReplayReader: peek at a stream without losing bytes
- parse_date: best-effort UTC date parsing
- ExtensionParser: capability for namespaced extension elements
"""

from unifeed.parsing.cursor import Cursor, Token, split_tag
from unifeed.parsing.dates import parse_date
from unifeed.parsing.extensions import (
    ExtensionParser,
    NamespaceExtensionParser,
    first_value,
)
from unifeed.parsing.stream import RecordingReader, ReplayReader

__all__ = [
    "Cursor",
    "Token",
    "split_tag",
    "parse_date",
    "ExtensionParser",
    "NamespaceExtensionParser",
    "first_value",
    "RecordingReader",
    "ReplayReader",
]
