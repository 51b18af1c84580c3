"""Observability – structlog processors.

ErrorStackProcessor: attaches ``stacktrace`` to every error-level entry.
Only installed when ``LoggerConfig.auto_stack_on_error`` is set.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ctxlog.observability.logging.stack import STACKTRACE_KEY, capture_stack

ERROR_METHODS = frozenset({"error", "exception", "critical", "fatal"})


class ErrorStackProcessor:
    """structlog processor that adds a stack dump to error-level events.

    Events that already carry a non-empty ``stacktrace`` (for example from
    :meth:`ContextLogger.error_with_stack`) are left untouched.

    Usage::

        structlog.wrap_logger(sink, processors=[ErrorStackProcessor(), ...])
    """

    def __init__(self, capture: Callable[..., str] = capture_stack) -> None:
        self._capture = capture

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        if method_name in ERROR_METHODS and not event_dict.get(STACKTRACE_KEY):
            # structlog and ctxlog frames above this one are dropped by the capture
            event_dict[STACKTRACE_KEY] = self._capture(2)
        return event_dict


__all__ = ["ERROR_METHODS", "ErrorStackProcessor"]
