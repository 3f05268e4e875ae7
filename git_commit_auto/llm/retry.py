"""Bounded retry with exponential backoff."""

import time
from typing import Callable, Iterator, Optional, TypeVar

T = TypeVar("T")


def backoff_delays(attempts: int, initial_delay: float = 1.0) -> Iterator[float]:
    """Delays slept between attempts: initial, doubled each time.

    There is one fewer delay than attempts; nothing is slept after the last one.
    """
    delay = initial_delay
    for _ in range(max(attempts - 1, 0)):
        yield delay
        delay *= 2


def retry_call(
    operation: Callable[[], T],
    attempts: int = 3,
    initial_delay: float = 1.0,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    sleep: Callable[[float], None] = time.sleep,
    on_retry: Optional[Callable[[int, BaseException, float], None]] = None,
) -> tuple[T, int]:
    """Call operation until it succeeds or attempts run out.

    Returns (result, attempts_used). The last error is re-raised once the
    budget is spent. on_retry(attempt, error, delay) runs before each sleep.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    delays = backoff_delays(attempts, initial_delay)
    attempt = 1
    while True:
        try:
            return operation(), attempt
        except retry_on as e:
            delay = next(delays, None)
            if delay is None:
                raise
            if on_retry is not None:
                on_retry(attempt, e, delay)
            sleep(delay)
            attempt += 1
