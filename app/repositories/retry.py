"""Retry policy for DuckDB write-write conflicts."""

from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import duckdb
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_random_exponential,
)

from app.errors import StoreUnavailable
from app.repositories.db import is_duplicate_key
from settings import TX_RETRY_ATTEMPTS, TX_RETRY_MAX_WAIT

T = TypeVar("T")


def _is_conflict(exc: BaseException) -> bool:
    """Optimistic-concurrency losers: conflicting commits and racing inserts."""
    return isinstance(exc, duckdb.TransactionException) or is_duplicate_key(exc)


def _is_outage(exc: BaseException) -> bool:
    return isinstance(exc, (duckdb.IOException, duckdb.ConnectionException))


def _log_retry(state: RetryCallState) -> None:
    logger.debug(
        "Write conflict in {} (attempt {}): {}",
        getattr(state.fn, "__qualname__", state.fn),
        state.attempt_number,
        state.outcome.exception() if state.outcome else None,
    )


def retry_on_conflict(fn: Callable[..., T]) -> Callable[..., T]:
    """Re-run fn when DuckDB reports a write conflict.

    fn must be a complete unit of work (its own statement or transaction).
    Conflicts that outlast the retry budget, and I/O or connection errors,
    surface as StoreUnavailable. Other DuckDB errors propagate unchanged.
    """
    retrying = retry(
        stop=stop_after_attempt(TX_RETRY_ATTEMPTS),
        wait=wait_random_exponential(multiplier=0.01, max=TX_RETRY_MAX_WAIT),
        retry=retry_if_exception(_is_conflict),
        before_sleep=_log_retry,
        reraise=True,
    )(fn)

    @wraps(fn)
    def wrapper(*args, **kwargs) -> T:
        try:
            return retrying(*args, **kwargs)
        except duckdb.Error as e:
            if not (_is_conflict(e) or _is_outage(e)):
                raise
            logger.error("{} failed: {}", fn.__qualname__, e)
            raise StoreUnavailable(f"Vote store unavailable: {e}") from e

    return wrapper
