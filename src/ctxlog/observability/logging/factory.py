"""Observability – JsonLoggerFactory and level parsing."""
from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any, TextIO

import structlog
from structlog.typing import FilteringBoundLogger

from ctxlog.observability.logging.processors import ErrorStackProcessor
from ctxlog.observability.logging.stack import capture_stack

LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

DEFAULT_LEVEL = logging.INFO


def parse_level(name: Any) -> int:
    """Map ``debug`` / ``info`` / ``warn`` / ``error`` to a level; anything else is INFO."""
    if not isinstance(name, str):
        return DEFAULT_LEVEL
    return LEVELS.get(name, DEFAULT_LEVEL)


class JsonLoggerFactory:
    """Build a self-contained structlog logger that renders one JSON object per line.

    Unlike ``structlog.configure`` nothing here touches process-global state,
    so several loggers with different sinks and levels can coexist.
    """

    @staticmethod
    def processors(
        auto_stack_on_error: bool = False,
        capture: Callable[..., str] = capture_stack,
    ) -> list[Any]:
        chain: list[Any] = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="time"),
        ]
        if auto_stack_on_error:
            chain.append(ErrorStackProcessor(capture))
        chain += [
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("msg"),
            structlog.processors.JSONRenderer(),
        ]
        return chain

    @staticmethod
    def create(
        level: str = "info",
        output: TextIO | None = None,
        *,
        auto_stack_on_error: bool = False,
        capture: Callable[..., str] = capture_stack,
    ) -> FilteringBoundLogger:
        return structlog.wrap_logger(
            structlog.PrintLogger(file=output if output is not None else sys.stdout),
            processors=JsonLoggerFactory.processors(auto_stack_on_error, capture),
            wrapper_class=structlog.make_filtering_bound_logger(parse_level(level)),
            cache_logger_on_first_use=True,
        )


__all__ = ["DEFAULT_LEVEL", "JsonLoggerFactory", "LEVELS", "parse_level"]
