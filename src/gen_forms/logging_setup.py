"""
Logging configuration for Gen-Forms.

All modules log through named loggers under ``gen-forms``. This module
wires handlers for them and provides helpers that log the start, end and
duration of service operations.
"""

import functools
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

ROOT_LOGGER = "gen-forms"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
VERBOSE_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(module)s:%(lineno)d %(message)s"

_HANDLER_MARKER = "_gen_forms_handler"

logger = logging.getLogger(ROOT_LOGGER)


def setup_logging(
    enabled: bool = True,
    console: bool = True,
    verbose: bool = False,
    file_path: str | None = None,
    level: str = "INFO",
) -> None:
    """
    Configure logging for Gen-Forms.

    Loggers named ``gen-forms*`` (``gen-forms-mcp``, ``gen-forms-http`` and
    the ``gen-forms.*`` children) share the handlers installed here.
    Calling it again replaces the previous handlers.

    Args:
        enabled: Whether logging is enabled.
        console: Whether to log to stderr.
        verbose: Whether to include module and line number, at DEBUG level.
        file_path: Optional file to append log lines to.
        level: Log level name used when not verbose.

    Example:
        >>> from gen_forms.logging_setup import setup_logging
        >>> setup_logging(verbose=True)
    """
    names = (ROOT_LOGGER, f"{ROOT_LOGGER}-mcp", f"{ROOT_LOGGER}-http", f"{ROOT_LOGGER}-ui")
    targets = [logging.getLogger(name) for name in names]

    for target in targets:
        for handler in list(target.handlers):
            if getattr(handler, _HANDLER_MARKER, False):
                target.removeHandler(handler)
                handler.close()

    if not enabled:
        for target in targets:
            target.disabled = True
        return

    formatter = logging.Formatter(VERBOSE_LOG_FORMAT if verbose else LOG_FORMAT)
    handlers: list[logging.Handler] = []

    if console:
        handlers.append(logging.StreamHandler())

    if file_path:
        handlers.append(logging.FileHandler(file_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)

    for target in targets:
        target.disabled = False
        target.setLevel(logging.DEBUG if verbose else level.upper())
        target.propagate = False
        for handler in handlers:
            target.addHandler(handler)


def disable_logging() -> None:
    """Disable all Gen-Forms logging."""
    setup_logging(enabled=False)


@asynccontextmanager
async def logged_operation(
    name: str,
    **context,
) -> AsyncGenerator[None, None]:
    """
    Log an operation's start, completion with duration, and failure.

    Args:
        name: Name of the operation, e.g. ``"createForm"``.
        **context: Values included in the log lines (ids, counts, ...).

    Example:
        >>> async with logged_operation("deleteForm", form_id=form_id):
        ...     deleted = await store.delete(form_id)
    """
    details = " ".join(f"{key}={value}" for key, value in context.items())
    start = time.perf_counter()
    logger.debug(f"{name} started {details}".rstrip())
    try:
        yield
    except Exception as e:
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.warning(f"{name} failed after {duration_ms}ms: {type(e).__name__}: {e}")
        raise
    duration_ms = round((time.perf_counter() - start) * 1000, 2)
    logger.info(f"{name} completed in {duration_ms}ms {details}".rstrip())


def log_operation(name: str):
    """Decorator form of ``logged_operation`` for async functions."""

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            async with logged_operation(name):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
