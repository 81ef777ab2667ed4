"""Feed dialect detection.

The dialect is decided by the document's root element alone, so
detection stops as soon as the root start tag has been read.
"""

from typing import IO, Any

from unifeed.core.exceptions import FeedError
from unifeed.core.types import FeedType
from unifeed.parsing.cursor import DEFAULT_CHUNK_SIZE, Cursor

_ROOT_TYPES = {
    "rdf": FeedType.RSS,
    "rss": FeedType.RSS,
    "feed": FeedType.ATOM,
    "urlset": FeedType.SITEMAP,
}


def detect_feed_type(stream: IO[Any], chunk_size: int = DEFAULT_CHUNK_SIZE) -> FeedType:
    """Classify a document by its root element.

    Never raises: empty, malformed or unreadable input is UNKNOWN.
    The stream is consumed; wrap it in a RecordingReader to replay it.

    Args:
        stream: Readable byte or text stream
        chunk_size: Read size for the cursor

    Returns:
        The detected FeedType
    """
    cursor = Cursor(stream, chunk_size=chunk_size)
    try:
        cursor.find_root()
    except (FeedError, OSError):
        return FeedType.UNKNOWN
    return _ROOT_TYPES.get(cursor.name.lower(), FeedType.UNKNOWN)
