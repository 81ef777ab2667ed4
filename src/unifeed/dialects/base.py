"""Shared machinery for dialect extractors and translators.

Each dialect parser walks the document recursively. Every parent
element owns a dispatch table mapping lower-cased child names to
handlers; children without a handler are skipped whole. Handlers take
``(parser, cursor, target)`` and fill in ``target``, which always
belongs to the level that owns the table.
"""

import copy
from datetime import datetime
from typing import IO, Any, Callable, Generic, Mapping, Protocol, TypeVar

from unifeed.core.config import get_settings
from unifeed.core.exceptions import DateParseError, ExtensionError, FeedError
from unifeed.core.logging import get_logger
from unifeed.core.types import Extensions, Feed
from unifeed.parsing.cursor import Cursor
from unifeed.parsing.dates import parse_date
from unifeed.parsing.extensions import ExtensionParser, NamespaceExtensionParser

DialectFeed = TypeVar("DialectFeed")
DialectFeed_contra = TypeVar("DialectFeed_contra", contravariant=True)

logger = get_logger(__name__)

Handler = Callable[[Any, Cursor, Any], None]


def text_field(attr: str) -> Handler:
    """Build a handler that stores the element's text on ``target.attr``."""

    def handler(parser: Any, cursor: Cursor, target: Any) -> None:
        setattr(target, attr, cursor.read_text())

    return handler


def first_text_field(attr: str) -> Handler:
    """Like text_field, but only the first non-empty occurrence is kept."""

    def handler(parser: Any, cursor: Cursor, target: Any) -> None:
        if getattr(target, attr):
            cursor.skip()
        else:
            setattr(target, attr, cursor.read_text())

    return handler


def optional_text(value: str | None) -> str | None:
    """Trim a text field, mapping empty values to None."""
    value = (value or "").strip()
    return value or None


def copy_extensions(extensions: Extensions | None) -> Extensions | None:
    """Deep-copy an extensions mapping so the canonical feed owns its own."""
    return copy.deepcopy(extensions) if extensions else None


class Translator(Protocol[DialectFeed_contra]):
    """Maps a dialect-specific feed onto the canonical model.

    Implementations must be pure: no I/O and no mutation of the input.
    """

    def translate(self, feed: DialectFeed_contra) -> Feed:
        ...


class DialectParser(Generic[DialectFeed]):
    """Base class for the streaming extractors.

    Args:
        extensions: Capability handling extension elements. Defaults to a
            NamespaceExtensionParser over the dialect's base namespaces.
        chunk_size: Read size for the underlying cursor
    """

    #: Namespaces that belong to the dialect itself
    BASE_NAMESPACES: frozenset[str] = frozenset()

    def __init__(
        self,
        extensions: ExtensionParser | None = None,
        chunk_size: int | None = None,
    ) -> None:
        self.extensions = extensions or NamespaceExtensionParser(self.BASE_NAMESPACES)
        self.chunk_size = chunk_size or get_settings().read_chunk_size

    def parse(self, stream: IO[Any]) -> DialectFeed:
        """Parse a complete document from ``stream``.

        Raises:
            StructureError: On malformed XML or unexpected structure
            ExtensionError: If the extension parser fails
        """
        cursor = Cursor(stream, chunk_size=self.chunk_size)
        cursor.find_root()
        return self._parse_root(cursor)

    def _parse_root(self, cursor: Cursor) -> DialectFeed:
        raise NotImplementedError

    def _walk(
        self,
        cursor: Cursor,
        handlers: Mapping[str, Handler],
        target: Any,
        extensions: Extensions | None = None,
    ) -> Extensions | None:
        """Dispatch every child of the current element.

        When ``extensions`` is given, extension elements are delegated to
        the extension parser first and accumulated into it.

        Returns:
            The extension accumulator (None if none was given)
        """
        for name in cursor.children():
            if extensions is not None and self._is_extension(cursor):
                extensions = self._parse_extension(cursor, extensions)
                continue

            handler = handlers.get(name)
            if handler is None:
                cursor.skip()
            else:
                handler(self, cursor, target)

        return extensions

    def _is_extension(self, cursor: Cursor) -> bool:
        # Unprefixed elements are in the document's default namespace, whatever its URI
        if not cursor.prefix:
            return False
        return self.extensions.recognizes(cursor.namespace)

    def _parse_extension(self, cursor: Cursor, extensions: Extensions) -> Extensions:
        namespace, name = cursor.namespace, cursor.name
        try:
            return self.extensions.parse(cursor, extensions)
        except FeedError:
            raise
        except Exception as e:
            raise ExtensionError(
                f"extension parser failed on <{name}>: {e}",
                namespace=namespace,
                element=name,
            ) from e

    def _parse_date(self, value: str) -> datetime | None:
        """Best-effort date parse; failures are logged and yield None."""
        if not value:
            return None
        try:
            return parse_date(value)
        except DateParseError as e:
            logger.debug(f"Leaving parsed date unset: {e}")
            return None
