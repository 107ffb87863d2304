"""Resilience helpers (retry policy)."""

from .retry import DEFAULT_RETRY_CONFIG, RetryConfig, run_with_retry

__all__ = ["RetryConfig", "DEFAULT_RETRY_CONFIG", "run_with_retry"]
