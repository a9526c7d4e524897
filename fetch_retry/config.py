"""
Retry Configuration
===================
Backoff settings for retried fetches.
"""

import os
from dataclasses import dataclass


@dataclass
class RetryConfig:
    """Configuration for the retry loop and the default transport."""
    max_attempts: int = 5           # Total attempts, first one included
    base_delay: float = 1.0         # Seconds before the first retry
    exponential_base: float = 2.0   # Delay multiplier per attempt
    max_delay: float = 60.0         # Upper bound for a single delay
    jitter: float = 0.0             # Max random seconds added to each delay
    timeout: float = 30.0           # Per-request transport timeout

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0 or self.max_delay < 0 or self.jitter < 0:
            raise ValueError("delays must not be negative")
        if self.exponential_base < 1:
            raise ValueError("exponential_base must be at least 1")

    @classmethod
    def from_env(cls) -> "RetryConfig":
        """Build a config from FETCH_RETRY_* environment variables."""
        return cls(
            max_attempts=int(os.getenv("FETCH_RETRY_MAX_ATTEMPTS", "5")),
            base_delay=float(os.getenv("FETCH_RETRY_BASE_DELAY", "1.0")),
            exponential_base=float(os.getenv("FETCH_RETRY_EXPONENTIAL_BASE", "2.0")),
            max_delay=float(os.getenv("FETCH_RETRY_MAX_DELAY", "60.0")),
            jitter=float(os.getenv("FETCH_RETRY_JITTER", "0.0")),
            timeout=float(os.getenv("FETCH_RETRY_TIMEOUT", "30.0")),
        )
