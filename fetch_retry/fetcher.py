"""
Retrying Fetcher
================
HTTP fetch with exponential backoff for transient failures.
"""

import time
from functools import partial
from typing import Any, Mapping, Optional

import structlog
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from .config import RetryConfig
from .exceptions import EXHAUSTED_MESSAGE_PREFIX, HTTPStatusError, RetryExhausted
from .policy import RetryPolicy
from .transport import HttpxTransport, Response, Sleeper, Transport


class RetryingFetcher:
    """
    Performs a request and retries transient failures with backoff.

    Each attempt either returns a 2xx response, raises a non-retryable
    error straight to the caller, or sleeps ``base_delay * 2 ** i``
    seconds and tries again. When ``max_attempts`` are used up a
    ``RetryExhausted`` carrying the last error is raised.

    Example:
        with RetryingFetcher() as fetcher:
            response = fetcher.fetch("https://example.com/api", {"method": "GET"})
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        config: Optional[RetryConfig] = None,
        policy: Optional[RetryPolicy] = None,
        sleep: Optional[Sleeper] = None,
        logger: Any = None,
    ):
        self.config = config or RetryConfig()
        self.transport = transport if transport is not None else HttpxTransport(timeout=self.config.timeout)
        self.policy = policy or RetryPolicy()
        self.sleep = sleep if sleep is not None else time.sleep
        self.logger = logger if logger is not None else structlog.get_logger(__name__)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        """Close the transport if it holds resources."""
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def _wait(self):
        wait = wait_exponential(
            multiplier=self.config.base_delay,
            exp_base=self.config.exponential_base,
            max=self.config.max_delay,
        )
        if self.config.jitter:
            wait = wait + wait_random(0, self.config.jitter)
        return wait

    def _attempt(self, url: str, options: Optional[Mapping[str, Any]]) -> Response:
        response = self.transport.execute(url, options)
        status = response.status_code
        if 200 <= status < 300:
            return response
        raise HTTPStatusError(
            f"Request failed for {url} returned code {status}",
            status_code=status,
            url=url,
            response=response,
        )

    def _log_retry(self, url: str, retry_state: RetryCallState) -> None:
        self.logger.warning(
            "fetch_retry_scheduled",
            url=url,
            attempt=retry_state.attempt_number,
            delay=retry_state.next_action.sleep,
            error=str(retry_state.outcome.exception()),
        )

    def _raise_exhausted(self, url: str, retry_state: RetryCallState):
        last = retry_state.outcome.exception()
        self.logger.error(
            "fetch_retry_exhausted",
            url=url,
            attempts=retry_state.attempt_number,
            error=str(last),
        )
        raise RetryExhausted(
            f"{EXHAUSTED_MESSAGE_PREFIX}{last}",
            last_exception=last,
            attempts=retry_state.attempt_number,
            url=url,
        ) from last

    def fetch(self, url: str, options: Optional[Mapping[str, Any]] = None) -> Response:
        """
        Execute a request with exponential backoff retry.

        Args:
            url: Target URL
            options: Request options, handed to the transport untouched

        Returns:
            The first response with a 2xx status

        Raises:
            RetryExhausted: If every attempt failed with a retryable error
            Exception: The original error, if it is not retryable
        """
        if not url:
            raise ValueError("url must be a non-empty string")

        retrying = Retrying(
            stop=stop_after_attempt(self.config.max_attempts),
            wait=self._wait(),
            retry=retry_if_exception(self.policy.is_retryable),
            sleep=self.sleep,
            before_sleep=partial(self._log_retry, url),
            retry_error_callback=partial(self._raise_exhausted, url),
        )
        return retrying(self._attempt, url, options)


# Singleton instance
_fetcher: Optional[RetryingFetcher] = None


def get_fetcher() -> RetryingFetcher:
    """Get or create the shared fetcher, configured from the environment."""
    global _fetcher
    if _fetcher is None:
        _fetcher = RetryingFetcher(config=RetryConfig.from_env())
    return _fetcher


def fetch_with_retry(url: str, options: Optional[Mapping[str, Any]] = None) -> Response:
    """Fetch ``url`` through the shared fetcher."""
    return get_fetcher().fetch(url, options)
