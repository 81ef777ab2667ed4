"""Custom exceptions for Unifeed.

This module defines the exception hierarchy used throughout Unifeed
for clear error handling and reporting.
"""


class FeedError(Exception):
    """Base exception for all Unifeed errors.

    All Unifeed-specific exceptions inherit from this class,
    allowing users to catch all Unifeed errors with a single except clause.
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """Initialize FeedError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ParseError(FeedError):
    """Raised when a feed document cannot be parsed."""


class StructureError(ParseError):
    """Raised when the XML structure is not what the parser expects.

    Covers malformed XML, mismatched tags and documents that end
    before the element being parsed is closed. Always fatal.
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        found: str | None = None,
        position: tuple[int, int] | None = None,
    ) -> None:
        """Initialize StructureError.

        Args:
            message: Human-readable error message
            expected: The tag the parser expected
            found: The tag (or event) actually found
            position: (line, column) reported by the XML parser
        """
        details: dict = {}
        if expected:
            details["expected"] = expected
        if found:
            details["found"] = found
        if position:
            details["line"], details["column"] = position
        super().__init__(message, details)
        self.expected = expected
        self.found = found
        self.position = position


class ExtensionError(ParseError):
    """Raised when an extension parser fails on a namespaced element."""

    def __init__(
        self,
        message: str,
        namespace: str | None = None,
        element: str | None = None,
    ) -> None:
        """Initialize ExtensionError.

        Args:
            message: Human-readable error message
            namespace: Namespace URI of the failing element
            element: Local name of the failing element
        """
        details = {}
        if namespace:
            details["namespace"] = namespace
        if element:
            details["element"] = element
        super().__init__(message, details)
        self.namespace = namespace
        self.element = element


class DateParseError(ParseError):
    """Raised when a date string matches none of the known formats.

    Extractors treat this as recoverable and leave the parsed date unset.
    """

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message, {"value": value} if value else None)
        self.value = value


class UnknownFeedTypeError(FeedError):
    """Raised when a document's root element matches no supported dialect."""


class FetchError(FeedError):
    """Raised when retrieving a feed over HTTP fails.

    This is raised for transport failures such as timeouts,
    refused connections or proxy errors.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        """Initialize FetchError.

        Args:
            message: Human-readable error message
            url: The URL being fetched
        """
        super().__init__(message, {"url": url} if url else None)
        self.url = url


class HTTPError(FetchError):
    """Raised when the server answers with a status outside 2xx-3xx."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        status: str | None = None,
    ) -> None:
        """Initialize HTTPError.

        Args:
            message: Human-readable error message
            url: The URL that failed
            status_code: HTTP status code
            status: HTTP status text (reason phrase)
        """
        super().__init__(message, url=url)
        if status_code:
            self.details["status_code"] = status_code
        self.status_code = status_code
        self.status = status
