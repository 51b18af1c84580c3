"""Observability – request-scoped context fields.

A context can be a :class:`~ctxlog.observability.correlation.RequestContext`
(or any object exposing ``trace_id`` / ``client_ip`` / ``merchant_id`` /
``operator_id``), or a plain mapping keyed by the wire-contract names
``traceid``, ``ip``, ``MERCHANT_KEY`` and ``OPERATOR_KEY``.  Only non-empty
strings count as present; anything else is silently treated as absent.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

TRACE_ID_KEY = "traceid"
CLIENT_IP_KEY = "ip"
MERCHANT_KEY = "MERCHANT_KEY"
OPERATOR_KEY = "OPERATOR_KEY"

# (attribute, mapping key, output key)
_SOURCES: tuple[tuple[str, str, str], ...] = (
    ("trace_id", TRACE_ID_KEY, "trace"),
    ("client_ip", CLIENT_IP_KEY, "ip"),
    ("merchant_id", MERCHANT_KEY, "merchantId"),
    ("operator_id", OPERATOR_KEY, "operator"),
)


@dataclasses.dataclass(frozen=True)
class ContextFields:
    trace_id: str | None = None
    client_ip: str | None = None
    merchant_id: str | None = None
    operator_id: str | None = None

    def as_fields(self) -> dict[str, str]:
        fields: dict[str, str] = {}
        for attr, _, out in _SOURCES:
            value = getattr(self, attr)
            if value:
                fields[out] = value
        return fields


def _present(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _lookup(ctx: Any, attr: str, key: str) -> Any:
    try:
        if isinstance(ctx, Mapping):
            return ctx.get(key)
        return getattr(ctx, attr, None)
    except Exception:  # noqa: BLE001
        return None


def extract_context_fields(ctx: Any) -> ContextFields:
    """Pull the optional request fields out of *ctx*; ``None`` yields no fields."""
    if ctx is None:
        return ContextFields()
    return ContextFields(
        **{attr: _present(_lookup(ctx, attr, key)) for attr, key, _ in _SOURCES}
    )


__all__ = [
    "CLIENT_IP_KEY",
    "ContextFields",
    "MERCHANT_KEY",
    "OPERATOR_KEY",
    "TRACE_ID_KEY",
    "extract_context_fields",
]
