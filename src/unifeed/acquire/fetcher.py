"""HTTP retrieval of feed documents.

This module provides the FeedFetcher class, a thin synchronous wrapper
around httpx with optional proxy support.
"""

import base64

import httpx

from unifeed.core.config import FeedSettings, get_settings
from unifeed.core.exceptions import FetchError, HTTPError
from unifeed.core.logging import LogContext, get_logger

logger = get_logger(__name__)


def build_proxy(
    address: str,
    username: str | None = None,
    password: str | None = None,
) -> httpx.Proxy:
    """Build an httpx proxy for ``host:port`` with optional basic auth.

    Credentials are sent as a ``Proxy-Authorization: Basic`` header.

    Args:
        address: Proxy as ``host:port`` or a full URL
        username: Proxy user name
        password: Proxy password

    Returns:
        Configured httpx.Proxy
    """
    url = address if "://" in address else f"http://{address}"
    headers = {}
    if username or password:
        token = base64.b64encode(f"{username or ''}:{password or ''}".encode()).decode("ascii")
        headers["Proxy-Authorization"] = f"Basic {token}"
    return httpx.Proxy(url, headers=headers)


class FeedFetcher:
    """Fetch raw feed documents over HTTP.

    Any 2xx or 3xx response is a success; everything else raises
    HTTPError. Redirects are followed unless disabled in settings.

    Example:
        >>> fetcher = FeedFetcher()
        >>> body = fetcher.fetch("https://example.com/sitemap.xml")
    """

    def __init__(
        self,
        settings: FeedSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize FeedFetcher.

        Args:
            settings: Settings providing timeouts and headers
            client: Client used for direct requests. When omitted a new
                client is created per request.
        """
        self.settings = settings or get_settings()
        self._client = client

    def _build_client(self, proxy: httpx.Proxy | None = None) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(
                self.settings.http_timeout,
                connect=self.settings.tls_handshake_timeout,
            ),
            follow_redirects=self.settings.follow_redirects,
            headers={"User-Agent": self.settings.user_agent},
            proxy=proxy,
        )

    def fetch(
        self,
        url: str,
        proxy: str | None = None,
        proxy_username: str | None = None,
        proxy_password: str | None = None,
    ) -> bytes:
        """GET ``url`` and return the response body.

        Args:
            url: Feed URL
            proxy: Optional proxy as ``host:port``
            proxy_username: Proxy basic-auth user
            proxy_password: Proxy basic-auth password

        Returns:
            Raw response body

        Raises:
            HTTPError: If the status is outside 2xx-3xx
            FetchError: On transport failures
        """
        if proxy:
            client = self._build_client(build_proxy(proxy, proxy_username, proxy_password))
            owned = True
        elif self._client is not None:
            client, owned = self._client, False
        else:
            client, owned = self._build_client(), True

        with LogContext(logger, url=url, proxy=proxy):
            logger.info(f"Fetching {url}")
            try:
                response = client.get(url)
            except httpx.HTTPError as e:
                raise FetchError(f"Request failed: {e}", url=url) from e
            finally:
                if owned:
                    client.close()

            if not 200 <= response.status_code < 400:
                raise HTTPError(
                    f"http error: {response.status_code} {response.reason_phrase}",
                    url=url,
                    status_code=response.status_code,
                    status=response.reason_phrase,
                )

            logger.debug(f"Fetched {len(response.content)} bytes from {url}")
            return response.content
