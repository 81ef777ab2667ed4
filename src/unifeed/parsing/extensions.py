"""Pluggable handling of namespaced extension elements.

Every dialect has a set of base namespaces it understands natively.
Anything else (Dublin Core, iTunes, Media RSS, ...) is handed to an
ExtensionParser, which the core treats as an opaque capability.
"""

from typing import Iterable, Protocol, runtime_checkable

from unifeed.core.types import Extension, Extensions
from unifeed.parsing.cursor import Cursor, split_tag


@runtime_checkable
class ExtensionParser(Protocol):
    """Capability the extractors delegate extension elements to."""

    def recognizes(self, namespace: str) -> bool:
        """Return True if elements in ``namespace`` are extensions."""
        ...

    def parse(self, cursor: Cursor, extensions: Extensions) -> Extensions:
        """Consume the element under the cursor into ``extensions``.

        Args:
            cursor: Cursor positioned on the extension's start tag
            extensions: Accumulator built so far for the enclosing element

        Returns:
            The updated accumulator. The cursor must be left on the
            element's end tag.
        """
        ...


class NamespaceExtensionParser:
    """Generic extension parser that keeps elements as Extension trees.

    Any namespaced element outside ``base_namespaces`` is an extension.
    The extractors only consult it for prefixed elements; unprefixed
    children always belong to the document's own vocabulary. Results are
    keyed by the declared prefix (``dc``, ``media``...), falling back to the
    namespace URI when no prefix is in scope.

    Example:
        >>> parser = NamespaceExtensionParser(["http://www.sitemaps.org/schemas/sitemap/0.9"])
        >>> parser.recognizes("http://purl.org/dc/elements/1.1/")
        True
    """

    def __init__(self, base_namespaces: Iterable[str] = ()) -> None:
        self.base_namespaces = frozenset(base_namespaces) | {""}

    def recognizes(self, namespace: str) -> bool:
        return namespace not in self.base_namespaces

    def parse(self, cursor: Cursor, extensions: Extensions) -> Extensions:
        key = cursor.prefix or cursor.namespace
        extension = self._read(cursor)
        extensions.setdefault(key, {}).setdefault(extension.name, []).append(extension)
        return extensions

    def _read(self, cursor: Cursor) -> Extension:
        element = cursor.element
        name = cursor.name
        attrs = {split_tag(key)[1]: value for key, value in element.attrib.items()}

        children: dict[str, list[Extension]] = {}
        for _ in cursor.children():
            child = self._read(cursor)
            children.setdefault(child.name, []).append(child)

        return Extension(
            name=name,
            value=(element.text or "").strip(),
            attrs=attrs,
            children=children,
        )


def first_value(extensions: Extensions | None, prefix: str, name: str) -> str:
    """Return the first non-empty value of ``prefix:name``, or ""."""
    for extension in (extensions or {}).get(prefix, {}).get(name, []):
        if extension.value:
            return extension.value
    return ""
