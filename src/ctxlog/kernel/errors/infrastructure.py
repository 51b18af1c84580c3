"""Infrastructure errors: failures of external metadata sources."""

from __future__ import annotations

from typing import Any

from ctxlog.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    default_code = "infrastructure_error"


class MetadataProviderError(InfrastructureError):
    """A build/instance metadata provider could not produce a snapshot."""

    default_code = "metadata_provider_error"

    def __init__(
        self,
        provider: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Metadata provider '{provider}' failed", **kwargs)
        self.provider = provider


__all__ = ["InfrastructureError", "MetadataProviderError"]
