"""
Retries for planner LLM calls.

Only rate limits, overloaded models, timeouts and network failures are
retried. The wait doubles after every failed attempt, is capped at
`max_delay`, and gives way to the provider's own "retry in N s" hint
when a rate limit carries one. Anything else (bad key, malformed
request, unexpected exception) propagates on the first attempt.
"""

import logging
import time
from functools import wraps
from typing import Callable, Optional, Tuple, Type

from composer.llm.errors import (
    NetworkError,
    ProviderNotAvailableError,
    RateLimitError,
    TimeoutError,
)


logger = logging.getLogger(__name__)

RETRYABLE_ERRORS: Tuple[Type[Exception], ...] = (
    RateLimitError,
    ProviderNotAvailableError,
    TimeoutError,
    NetworkError,
)

MAX_DELAY = 30.0


def backoff_delay(attempt: int, base_delay: float = 1.0, max_delay: float = MAX_DELAY) -> float:
    """Wait before retry number `attempt` (0-indexed), capped at max_delay."""
    return min(base_delay * (2 ** attempt), max_delay)


def _wait_for(error: Exception, attempt: int, base_delay: float, max_delay: float) -> float:
    suggested: Optional[float] = getattr(error, "retry_after", None)
    if suggested is not None:
        return min(suggested, max_delay)
    return backoff_delay(attempt, base_delay, max_delay)


def retry_with_backoff(
    max_attempts: int = 3,
    base_delay: float = 1.0,
    max_delay: float = MAX_DELAY,
    retryable: Tuple[Type[Exception], ...] = RETRYABLE_ERRORS,
    sleep: Callable[[float], None] = time.sleep,
):
    """Decorator retrying `retryable` errors of a provider call.

    Args:
        max_attempts: Total attempts including the first one
        base_delay: Wait after the first failure, in seconds
        max_delay: Upper bound for any single wait
        retryable: Exception types worth another attempt
        sleep: Sleep function (replaceable in tests)

    Example:
        >>> @retry_with_backoff(max_attempts=3)
        ... def generate(self, request): ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            attempt = 0
            while True:
                try:
                    return func(*args, **kwargs)
                except retryable as e:
                    attempt += 1
                    if attempt >= max_attempts:
                        logger.error(f"{func.__name__} failed after {attempt} attempt(s): {e}")
                        raise
                    delay = _wait_for(e, attempt - 1, base_delay, max_delay)
                    logger.warning(
                        f"{type(e).__name__} in {func.__name__} "
                        f"(attempt {attempt}/{max_attempts}), retrying in {delay:g}s: {e}"
                    )
                    sleep(delay)
        return wrapper
    return decorator
