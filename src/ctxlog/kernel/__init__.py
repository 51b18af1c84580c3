"""Kernel – framework-agnostic building blocks."""

from ctxlog.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    MetadataProviderError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "MetadataProviderError",
]
