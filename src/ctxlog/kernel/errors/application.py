"""Application-layer errors: misuse or misconfiguration by the host service."""

from __future__ import annotations

from ctxlog.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
