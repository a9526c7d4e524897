"""
Fetch Transport
===============
Capabilities the retry loop depends on, plus the default httpx transport.
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

import httpx
import structlog

from .exceptions import TransportConnectionError, TransportError, TransportTimeoutError

logger = structlog.get_logger(__name__)

USER_AGENT = "fetch-retry"


@runtime_checkable
class Response(Protocol):
    """Anything exposing an integer HTTP status code."""
    status_code: int


@runtime_checkable
class Transport(Protocol):
    """Executes a single request. Must not retry on its own."""

    def execute(self, url: str, options: Optional[Mapping[str, Any]] = None) -> Response:
        ...


class Sleeper(Protocol):
    """Blocking sleep taking seconds, e.g. ``time.sleep``."""

    def __call__(self, seconds: float) -> None:
        ...


class HttpxTransport:
    """
    Synchronous transport over ``httpx.Client``.

    ``options`` accepts ``method`` (default ``GET``) plus any keyword
    ``httpx.Client.request`` understands: headers, params, json, content,
    data, timeout, ... Responses are returned whatever their status code.

    Usage:
        with HttpxTransport(timeout=10.0) as transport:
            response = transport.execute("https://example.com", {"method": "POST", "json": {}})
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
        follow_redirects: bool = True,
    ):
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self._client = client
        self._owns_client = client is None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                follow_redirects=self.follow_redirects,
                headers={"User-Agent": USER_AGENT},
            )
        return self._client

    def close(self):
        """Close the underlying HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def execute(self, url: str, options: Optional[Mapping[str, Any]] = None) -> httpx.Response:
        kwargs = dict(options or {})
        method = str(kwargs.pop("method", "GET")).upper()

        try:
            return self._get_client().request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(f"Timeout while requesting {url}: {e}", url=url) from e
        except (httpx.NetworkError, httpx.RemoteProtocolError) as e:
            raise TransportConnectionError(f"Failed to connect to {url}: {e}", url=url) from e
        except httpx.HTTPError as e:
            logger.debug("fetch_transport_failed", url=url, method=method, error=str(e))
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e
