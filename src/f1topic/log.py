"""Logging setup and the fetch-call logging decorator."""

from __future__ import annotations

import functools
import logging
import sys
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "f1topic"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(quiet: bool = False, log_file: str | None = None) -> logging.Logger:
    """Attach a single handler to the package logger.

    Logs go to stderr, or to ``log_file`` when given. With ``quiet`` only
    CRITICAL records get through. Calling this again replaces the handler.
    """
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.CRITICAL if quiet else logging.INFO)
    logger.propagate = False
    return logger


def log_api_call(fn: F) -> F:
    """Decorator that logs fetcher calls, their result size and failures."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger.info("CALL: %s", fn.__qualname__)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        count = len(result) if isinstance(result, list) else 1
        logger.info(
            "OK: %s -> %d items (%.3fs)",
            fn.__qualname__, count, elapsed,
        )
        return result

    return wrapper  # type: ignore[return-value]
