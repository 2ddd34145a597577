"""Structured logging setup for quoting scripts and services."""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager

import structlog


def configure_logging(*, json_output: bool = True, level: str = "INFO") -> None:
    """Configure structlog.

    Args:
        json_output: If True, output JSON logs; otherwise a console renderer
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def quote_context(pool_address: str, token_in: str) -> AbstractContextManager[None]:
    """Bind the pool and input token to every log event emitted inside the block.

    Example:
        >>> with quote_context(pool.address, weth):
        ...     logger.info("pool_quoter.quote_computed")  # carries pool= and token_in=
    """
    return structlog.contextvars.bound_contextvars(pool=pool_address, token_in=token_in)
