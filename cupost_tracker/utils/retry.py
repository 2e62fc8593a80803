import functools
import random
import time
from typing import Any, Callable, Optional, Tuple, Type

from cupost_tracker.config import BASE_RETRY_DELAY, MAX_RETRIES, MAX_RETRY_DELAY
from cupost_tracker.logger import get_logger

logger = get_logger(__name__)


def exponential_backoff_retry(
    max_retries: int = MAX_RETRIES,
    base_delay: float = BASE_RETRY_DELAY,
    max_delay: float = MAX_RETRY_DELAY,
    exceptions: Tuple[Type[Exception], ...] = (Exception,),
    jitter: bool = True,
    sleep: Optional[Callable[[float], None]] = None,
):
    """
    Decorator that retries the wrapped call with exponential backoff.

    Args:
        max_retries: Maximum number of attempts (at least one is always made)
        base_delay: Initial delay between attempts in seconds
        max_delay: Upper bound for a single delay in seconds
        exceptions: Exception types that trigger another attempt
        jitter: Whether to randomize each delay between 50% and 100%
        sleep: Function used to wait between attempts, time.sleep by default

    The last exception is re-raised unchanged once attempts are exhausted.
    Exceptions outside ``exceptions`` propagate immediately.
    """
    attempts = max(1, max_retries)

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            for attempt in range(1, attempts + 1):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if attempt == attempts:
                        logger.error(
                            f"Function {func.__name__} failed after {attempts} attempts",
                            extra={
                                "function": func.__name__,
                                "attempt": attempt,
                                "max_retries": attempts,
                                "exception": str(e),
                            },
                        )
                        raise

                    delay = min(base_delay * (2 ** (attempt - 1)), max_delay)
                    if jitter:
                        delay = delay * (0.5 + random.random() * 0.5)

                    logger.warning(
                        f"Function {func.__name__} failed on attempt {attempt}, retrying in {delay:.2f}s",
                        extra={
                            "function": func.__name__,
                            "attempt": attempt,
                            "max_retries": attempts,
                            "delay": delay,
                            "exception": str(e),
                        },
                    )
                    (sleep or time.sleep)(delay)

        return wrapper

    return decorator
