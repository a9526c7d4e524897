"""
Fetch Exceptions
================
Exception classes for retried HTTP fetches.
"""

from typing import Any, Optional

# Prefix of the message raised once every attempt has failed.
EXHAUSTED_MESSAGE_PREFIX = "最大リトライ回数を超過しました: "


class FetchError(Exception):
    """Base exception for all fetch errors."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(message)


class TransportError(FetchError):
    """Raised when the transport could not complete the request."""
    retryable = False


class TransportTimeoutError(TransportError):
    """Raised specifically on timeouts."""
    retryable = True


class TransportConnectionError(TransportError):
    """Raised when the remote host is unreachable or dropped the connection."""
    retryable = True


class HTTPStatusError(FetchError):
    """Raised when a response arrives with a status outside 2xx."""

    def __init__(
        self,
        message: str,
        status_code: int,
        url: Optional[str] = None,
        response: Any = None,
    ):
        self.status_code = status_code
        self.response = response
        super().__init__(message, url=url)


class RetryExhausted(FetchError):
    """Raised when all retry attempts have been exhausted."""

    def __init__(
        self,
        message: str,
        last_exception: Optional[BaseException] = None,
        attempts: int = 0,
        url: Optional[str] = None,
    ):
        self.last_exception = last_exception
        self.attempts = attempts
        super().__init__(message, url=url)
