"""Observability – ambient request context."""
from ctxlog.observability.correlation.context import CorrelationContext, RequestContext

__all__ = ["CorrelationContext", "RequestContext"]
