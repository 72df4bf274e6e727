"""Exponential backoff retry decorator."""

import functools
import time

from .log import get_logger


def with_retry(max_retries: int = 3, base_delay: float = 2.0, retry_on=(Exception,)):
    """Decorator: retry with exponential backoff on exception.

    Delays: base_delay * 2^attempt (2s -> 4s -> 8s by default). Only
    exceptions matching ``retry_on`` are retried; others propagate at once.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger("retry")
            last_exc = None
            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except retry_on as e:
                    last_exc = e
                    if attempt < max_retries:
                        delay = base_delay * (2 ** attempt)
                        logger.warning(
                            "%s failed (attempt %d/%d): %s, retrying in %.1fs",
                            func.__name__, attempt + 1, max_retries + 1, e, delay
                        )
                        time.sleep(delay)
                    else:
                        logger.error(
                            "%s failed after %d attempts: %s",
                            func.__name__, max_retries + 1, e
                        )
            raise last_exc
        return wrapper
    return decorator
