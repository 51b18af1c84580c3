"""Observability – request context and enriched structured logging."""

from ctxlog.observability.correlation import CorrelationContext, RequestContext
from ctxlog.observability.logging import ContextLogger, LoggerConfig, init

__all__ = [
    "ContextLogger",
    "CorrelationContext",
    "LoggerConfig",
    "RequestContext",
    "init",
]
