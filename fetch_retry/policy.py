"""
Retry Policy
============
Decides whether a failed attempt is worth retrying.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from .exceptions import FetchError, HTTPStatusError, TransportError

# Message fragments of transient gateway, timeout and host errors.
DEFAULT_RETRYABLE_MARKERS: Tuple[str, ...] = (
    "502",
    "503",
    "504",
    "Timeout",
    "server error",
)

DEFAULT_RETRYABLE_STATUS_CODES: FrozenSet[int] = frozenset({502, 503, 504})


@dataclass(frozen=True)
class RetryPolicy:
    """
    Retryability classification for fetch failures.

    Structured errors are classified by their type and status code.
    Errors from foreign transports fall back to matching their message
    against ``retryable_markers``.
    """
    retryable_status_codes: FrozenSet[int] = field(
        default_factory=lambda: DEFAULT_RETRYABLE_STATUS_CODES
    )
    retryable_markers: Tuple[str, ...] = DEFAULT_RETRYABLE_MARKERS

    def is_retryable(self, exc: BaseException) -> bool:
        if isinstance(exc, HTTPStatusError):
            return exc.status_code in self.retryable_status_codes
        if isinstance(exc, TransportError):
            return exc.retryable
        if isinstance(exc, FetchError):
            return False
        message = str(exc)
        return any(marker in message for marker in self.retryable_markers)
