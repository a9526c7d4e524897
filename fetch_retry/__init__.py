"""
Fetch Retry
===========
HTTP fetch with exponential backoff for automation scripts.
"""

__version__ = "0.1.0"

# Configuration
from fetch_retry.config import RetryConfig

# Exceptions
from fetch_retry.exceptions import (
    EXHAUSTED_MESSAGE_PREFIX,
    FetchError,
    TransportError,
    TransportTimeoutError,
    TransportConnectionError,
    HTTPStatusError,
    RetryExhausted,
)

# Policy
from fetch_retry.policy import (
    RetryPolicy,
    DEFAULT_RETRYABLE_MARKERS,
    DEFAULT_RETRYABLE_STATUS_CODES,
)

# Transport
from fetch_retry.transport import (
    Response,
    Transport,
    Sleeper,
    HttpxTransport,
)

# Fetcher
from fetch_retry.fetcher import (
    RetryingFetcher,
    get_fetcher,
    fetch_with_retry,
)

__all__ = [
    "__version__",
    "RetryConfig",
    "EXHAUSTED_MESSAGE_PREFIX",
    "FetchError",
    "TransportError",
    "TransportTimeoutError",
    "TransportConnectionError",
    "HTTPStatusError",
    "RetryExhausted",
    "RetryPolicy",
    "DEFAULT_RETRYABLE_MARKERS",
    "DEFAULT_RETRYABLE_STATUS_CODES",
    "Response",
    "Transport",
    "Sleeper",
    "HttpxTransport",
    "RetryingFetcher",
    "get_fetcher",
    "fetch_with_retry",
]
