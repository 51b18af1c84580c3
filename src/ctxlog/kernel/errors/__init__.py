"""Kernel error hierarchy, public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError       (application.py)
    │   └── ConfigError        (ctxlog.config.validation)
    └── InfrastructureError    (infrastructure.py)
        └── MetadataProviderError
"""

from ctxlog.kernel.errors.application import ApplicationError
from ctxlog.kernel.errors.base import BaseError
from ctxlog.kernel.errors.infrastructure import InfrastructureError, MetadataProviderError

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "MetadataProviderError",
]
