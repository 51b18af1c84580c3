"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import contextlib
import dataclasses
from collections.abc import Iterator, Mapping
from contextvars import ContextVar


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Request-scoped values that enrich every log entry issued while it is active."""
    trace_id: str | None = None
    client_ip: str | None = None
    merchant_id: str | None = None
    operator_id: str | None = None

    def replace(self, **changes: str | None) -> "RequestContext":
        return dataclasses.replace(self, **changes)


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_ctxlog_request_ctx", default=None)


class CorrelationContext:
    """Ambient request context stored in a ``ContextVar``.

    Each thread and each asyncio task sees its own value, so concurrent
    requests never observe each other's context.
    """

    @staticmethod
    def set(ctx: RequestContext | None) -> None:
        _CTX_VAR.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def require() -> RequestContext:
        ctx = _CTX_VAR.get()
        if ctx is None:
            raise RuntimeError("No RequestContext in current context")
        return ctx

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    @contextlib.contextmanager
    def scope(ctx: RequestContext) -> Iterator[RequestContext]:
        """Activate *ctx* for the duration of a ``with`` block."""
        token = _CTX_VAR.set(ctx)
        try:
            yield ctx
        finally:
            _CTX_VAR.reset(token)

    @staticmethod
    def set_from_headers(headers: Mapping[str, str]) -> RequestContext:
        """Build a :class:`RequestContext` from HTTP headers and store it.

        Header names are matched case-insensitively.

        * trace: ``X-Trace-Id``, else the trace-id segment of W3C
          ``traceparent`` (``ver-trace_id-parent_id-flags``)
        * client ip: first hop of ``X-Forwarded-For``, else ``X-Real-IP``
        * merchant: ``X-Merchant-Id``
        * operator: ``X-Operator-Id``

        Empty header values are treated as absent.
        """
        norm: dict[str, str] = {k.lower(): v.strip() for k, v in headers.items()}

        trace_id = norm.get("x-trace-id") or None
        if trace_id is None:
            traceparent = norm.get("traceparent")
            if traceparent:
                parts = traceparent.split("-")
                if len(parts) >= 2 and parts[1]:
                    trace_id = parts[1]

        client_ip: str | None = None
        forwarded = norm.get("x-forwarded-for")
        if forwarded:
            client_ip = forwarded.split(",")[0].strip() or None
        if client_ip is None:
            client_ip = norm.get("x-real-ip") or None

        ctx = RequestContext(
            trace_id=trace_id,
            client_ip=client_ip,
            merchant_id=norm.get("x-merchant-id") or None,
            operator_id=norm.get("x-operator-id") or None,
        )
        _CTX_VAR.set(ctx)
        return ctx


__all__ = ["CorrelationContext", "RequestContext"]
