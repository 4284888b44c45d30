"""
HTTP Backend implementation using httpx.

Provides synchronous HTTP fetching with:
- Browser-like default headers
- Persistent connection reuse across requests
- Failure reporting through FetchFailed
"""

from __future__ import annotations

import time

import httpx

from .base import Backend, FetchFailed, FetchResult, RequestSpec


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class HttpBackend(Backend):
    """HTTP backend using a blocking httpx client.

    One request per fetch; a failed request is reported, never retried.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str | None = None,
        default_headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize HTTP backend.

        Args:
            timeout: Default request timeout in seconds
            user_agent: Custom user agent
            default_headers: Extra headers for all requests
            transport: Optional httpx transport (e.g. a MockTransport in tests)
        """
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.transport = transport

        self.default_headers = {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
            **(default_headers or {}),
        }

        self._client: httpx.Client | None = None

    @property
    def name(self) -> str:
        return "http"

    def _ensure_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers=self.default_headers,
                transport=self.transport,
            )
        return self._client

    def fetch(self, request: RequestSpec) -> FetchResult:
        """Fetch a URL.

        Args:
            request: Request specification

        Returns:
            FetchResult with response data

        Raises:
            FetchFailed: On transport error or non-2xx status
        """
        client = self._ensure_client()

        started = time.perf_counter()
        try:
            response = client.get(
                request.url,
                headers=request.headers or None,
                params=request.params or None,
                timeout=request.timeout if request.timeout is not None else httpx.USE_CLIENT_DEFAULT,
                follow_redirects=request.follow_redirects,
            )
        except httpx.HTTPError as e:
            raise FetchFailed(
                f"Couldn't connect to [{request.url}]: {e}",
                url=request.url,
                cause=e,
            ) from e
        elapsed_ms = (time.perf_counter() - started) * 1000

        result = FetchResult(
            url=request.url,
            final_url=str(response.url),
            status_code=response.status_code,
            html=response.text,
            headers=dict(response.headers),
            elapsed_ms=elapsed_ms,
        )

        if not result.ok:
            raise FetchFailed(
                f"Couldn't fetch [{request.url}]: HTTP {response.status_code}",
                url=request.url,
                status_code=response.status_code,
            )

        return result

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
        self._client = None
