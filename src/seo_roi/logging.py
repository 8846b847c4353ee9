"""Structured logging configuration with a per-calculation id."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog

__all__ = [
    "configure_logging",
    "get_logger",
    "calculation_id_var",
    "new_calculation_id",
    "calculation_scope",
]

# Context variable scoped to a single compute() call
calculation_id_var: ContextVar[str] = ContextVar("calculation_id", default="")


def new_calculation_id() -> str:
    return uuid.uuid4().hex[:12]


@contextmanager
def calculation_scope() -> Iterator[str]:
    """Bind a fresh calculation ID for the duration of the block.

    The previous value is restored on exit, so log events emitted after
    a calculation are not tagged with its ID.
    """
    cid = new_calculation_id()
    token = calculation_id_var.set(cid)
    try:
        yield cid
    finally:
        calculation_id_var.reset(token)


def _add_calculation_id(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Inject calculation_id into every log entry emitted inside a calculation."""
    cid = calculation_id_var.get("")
    if cid:
        event_dict.setdefault("calculation_id", cid)
    return event_dict


def configure_logging(*, json_output: bool = True, level: str = "INFO") -> None:
    """Configure structlog for the engine and its harness.

    Args:
        json_output: True for JSON lines, False for the coloured console renderer.
        level: Log level string.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        _add_calculation_id,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[level.upper()]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(**kwargs: Any) -> structlog.BoundLogger:
    """Get a bound logger with optional initial context."""
    return structlog.get_logger(**kwargs)  # type: ignore[no-any-return]
