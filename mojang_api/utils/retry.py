import time
import random
from typing import Callable, Any, Tuple, Type

from mojang_api.exceptions.mojang_exceptions import (
    MojangNetworkError,
    MojangServerError,
)
from mojang_api.utils.logging_config import get_logger

logger = get_logger("retry")


RETRYABLE_EXCEPTIONS = (
    MojangNetworkError,
    MojangServerError,
)


def retry_request(
    func: Callable[[], Any],
    retries: int = 1,
    backoff: float = 2.0,
    jitter: bool = True,
    retry_on: Tuple[Type[BaseException], ...] = RETRYABLE_EXCEPTIONS,
):
    """
    Wrap a callable with retries.

    Strategy:
    - `retries` is the total number of attempts; 1 runs the call once
    - Exponential backoff: backoff^attempt (2, 4, 8 ...)
    - Jitter: randomization to avoid retry storms
    - Retry only for `retry_on` (the HTTP layer decides what is retryable)
    """

    attempts = max(1, retries)

    for attempt in range(1, attempts + 1):
        try:
            return func()

        except retry_on as e:
            if attempt == attempts:
                if attempts > 1:
                    logger.error("All retry attempts failed.")
                raise

            logger.warning(f"Attempt {attempt} failed: {e}")

            # exponential backoff
            sleep_time = backoff ** attempt

            if jitter:
                sleep_time += random.uniform(0, 1.0)

            logger.info(f"Retrying in {sleep_time:.2f}s...")
            time.sleep(sleep_time)
