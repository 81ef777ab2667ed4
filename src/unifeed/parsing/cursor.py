"""Forward-only XML pull cursor.

The Cursor wraps ``xml.etree.ElementTree.XMLPullParser`` and exposes the
document as a stream of start/end tag events. Text, comments and
processing instructions never surface as tokens; element text is read
with ``read_text`` once a start tag has been reached.

Only the element currently being walked and its ancestors are kept in
memory: finished children of the root are detached as the cursor moves
past them, so arbitrarily long feeds can be walked.
"""

from collections import deque
from enum import Enum
from typing import IO, Any, Iterator
from xml.etree import ElementTree as ET

from unifeed.core.exceptions import StructureError

DEFAULT_CHUNK_SIZE = 4096

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class Token(Enum):
    """Events the cursor can stop on."""

    START = "start"
    END = "end"
    EOF = "eof"


def split_tag(tag: str) -> tuple[str, str]:
    """Split an ElementTree ``{namespace}local`` tag into its parts."""
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag


class Cursor:
    """Pull tokens from an XML document one tag at a time.

    Args:
        stream: Object with a ``read(size)`` method returning bytes or str
        chunk_size: Number of bytes (or characters) read per parser feed

    Example:
        >>> cursor = Cursor(io.BytesIO(b"<urlset><url><loc>a</loc></url></urlset>"))
        >>> cursor.find_root()
        >>> for name in cursor.children():
        ...     print(name, cursor.read_text())
        url a
    """

    def __init__(self, stream: IO[Any], chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._stream = stream
        self._chunk_size = chunk_size
        self._parser = ET.XMLPullParser(events=("start-ns", "start", "end"))
        self._events: deque[tuple[str, Any]] = deque()
        self._error: ET.ParseError | None = None
        self._closed = False

        # Namespace declarations seen before the next start tag
        self._declared: dict[str, str] = {}
        self._scopes: list[dict[str, str]] = []
        self._stack: list[ET.Element] = []

        self.token: Token | None = None
        self.element: ET.Element | None = None
        self.namespace = ""
        self.name = ""

    @property
    def depth(self) -> int:
        """Number of currently open elements, including the current one."""
        return len(self._stack)

    @property
    def prefix(self) -> str:
        """Declared prefix of the current element's namespace, if any."""
        if not self.namespace:
            return ""
        for scope in reversed(self._scopes):
            for prefix, uri in scope.items():
                if uri == self.namespace:
                    return prefix
        return ""

    def next_tag(self) -> Token:
        """Advance to the next start tag, end tag or end of document."""
        if self.token is Token.END:
            self._leave()

        while True:
            event = self._pull()
            if event is None:
                self.token = Token.EOF
                self.element = None
                self.namespace = self.name = ""
                return self.token

            kind, payload = event
            if kind == "start-ns":
                prefix, uri = payload
                self._declared[prefix] = uri
                continue

            self.element = payload
            self.namespace, self.name = split_tag(payload.tag)
            if kind == "start":
                self._scopes.append(self._declared)
                self._declared = {}
                self._stack.append(payload)
                self.token = Token.START
            else:
                self.token = Token.END
            return self.token

    def find_root(self) -> None:
        """Advance to the document's root start tag.

        Raises:
            StructureError: If the document is empty or malformed
        """
        if self.next_tag() is not Token.START:
            raise StructureError("document has no root element")

    def expect(self, token: Token, name: str) -> None:
        """Assert the cursor sits on ``token`` for element ``name``.

        Names are compared case-insensitively and without prefix.

        Raises:
            StructureError: On any mismatch
        """
        if self.token is not token or self.name.lower() != name.lower():
            found = self.token.value if self.token else "nothing"
            raise StructureError(
                f"expected {token.value} tag <{name}>, found {found} <{self.name}>",
                expected=name,
                found=self.name or found,
            )

    def children(self) -> Iterator[str]:
        """Yield the lower-cased name of each child start tag.

        The caller must consume every yielded child (handle it, read it
        or ``skip`` it) before asking for the next one. Iteration stops
        with the cursor on the parent's end tag.

        Raises:
            StructureError: If the document ends before the parent closes
        """
        parent = self.name
        while True:
            token = self.next_tag()
            if token is Token.EOF:
                raise StructureError(
                    f"document ended inside <{parent}>",
                    expected=parent,
                    found="EOF",
                )
            if token is Token.END:
                return
            yield self.name.lower()

    def skip(self) -> None:
        """Consume the current element and its whole subtree unread."""
        if self.token is not Token.START:
            raise StructureError("skip requires the cursor on a start tag", found=self.name)
        target = self.depth
        name = self.name
        while True:
            token = self.next_tag()
            if token is Token.EOF:
                raise StructureError(
                    f"document ended inside <{name}>",
                    expected=name,
                    found="EOF",
                )
            if token is Token.END and self.depth == target:
                return

    def read_text(self) -> str:
        """Consume the current element and return its trimmed text.

        Text of nested elements is concatenated in document order.
        """
        element = self.element
        self.skip()
        if element is None:
            return ""
        return "".join(element.itertext()).strip()

    def attribute(self, name: str, default: str = "") -> str:
        """Read an attribute of the current element.

        ``xmlns`` and ``xmlns:prefix`` return namespace declarations made
        on the element itself. ``prefix:local`` resolves the prefix
        against the declarations in scope.
        """
        if self.element is None:
            return default

        if name == "xmlns" or name.startswith("xmlns:"):
            declared = self._scopes[-1] if self._scopes else {}
            return declared.get(name.partition(":")[2], default)

        attrib = self.element.attrib
        prefix, sep, local = name.partition(":")
        if sep:
            uri = XML_NAMESPACE if prefix == "xml" else self._lookup(prefix)
            if uri is None:
                return default
            return attrib.get(f"{{{uri}}}{local}", default)

        if name in attrib:
            return attrib[name]
        for key, value in attrib.items():
            if split_tag(key)[1] == name:
                return value
        return default

    def _lookup(self, prefix: str) -> str | None:
        for scope in reversed(self._scopes):
            if prefix in scope:
                return scope[prefix]
        return None

    def _leave(self) -> None:
        element = self._stack.pop()
        self._scopes.pop()
        # Detach finished children of the root so memory stays flat
        if len(self._stack) == 1:
            self._stack[0].remove(element)

    def _pull(self) -> tuple[str, Any] | None:
        while not self._events:
            if self._error is not None:
                raise StructureError(
                    f"malformed XML: {self._error}",
                    position=getattr(self._error, "position", None),
                ) from self._error
            if self._closed:
                return None
            self._feed(self._stream.read(self._chunk_size))
        return self._events.popleft()

    def _feed(self, chunk: bytes | str) -> None:
        try:
            if chunk:
                self._parser.feed(chunk)
            else:
                self._closed = True
                self._parser.close()
            # Events before a syntax error are kept and delivered first
            self._events.extend(self._parser.read_events())
        except ET.ParseError as e:
            self._error = e
