"""Observability – build and instance metadata.

Two strategies are available:

* :class:`StaticMetadataProvider` – a snapshot taken once at start-up from
  ``IMAGE_TAG``, ``GIT_COMMIT``, ``GIT_BRANCH``, ``BUILD_TIME`` and
  ``HOSTNAME``.  This is the default and the recommended choice.
* :class:`ContainerMetadataProvider` – queries a container-runtime
  introspection callable on every log call.  Deprecated: it is much more
  expensive and makes every log call depend on the runtime API.
"""
from __future__ import annotations

import abc
import dataclasses
import functools
import logging
import os
import warnings
from collections.abc import Callable, Mapping
from typing import Any

from ctxlog.kernel.errors import MetadataProviderError

logger = logging.getLogger(__name__)

# (field name == output key, environment variable)
ENV_SOURCES: tuple[tuple[str, str], ...] = (
    ("image", "IMAGE_TAG"),
    ("git_commit", "GIT_COMMIT"),
    ("git_branch", "GIT_BRANCH"),
    ("build_time", "BUILD_TIME"),
    ("instance", "HOSTNAME"),
)


@dataclasses.dataclass(frozen=True)
class BuildMetadata:
    """Immutable identity of the running artifact; empty string means absent."""
    image: str = ""
    git_commit: str = ""
    git_branch: str = ""
    build_time: str = ""
    instance: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BuildMetadata":
        environ = os.environ if environ is None else environ
        return cls(**{name: environ.get(var, "") for name, var in ENV_SOURCES})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BuildMetadata":
        """Build from output-keyed data; non-string values are dropped."""
        values: dict[str, str] = {}
        for name, _ in ENV_SOURCES:
            value = data.get(name)
            if isinstance(value, str):
                values[name] = value
        return cls(**values)

    def as_fields(self) -> dict[str, str]:
        """Non-empty fields in emission order."""
        fields: dict[str, str] = {}
        for name, _ in ENV_SOURCES:
            value = getattr(self, name)
            if value:
                fields[name] = value
        return fields


@functools.lru_cache(maxsize=1)
def process_metadata() -> BuildMetadata:
    """Snapshot of the process environment, read on first use and then reused."""
    return BuildMetadata.from_env()


class MetadataProvider(abc.ABC):
    """Port: supply the :class:`BuildMetadata` attached to each entry."""

    @abc.abstractmethod
    def current(self) -> BuildMetadata:
        """Return metadata for the entry being built.  Must not raise."""


class StaticMetadataProvider(MetadataProvider):
    """Serves one snapshot for the lifetime of the provider.

    Without an explicit *metadata* the process-wide :func:`process_metadata`
    snapshot is used.
    """

    def __init__(self, metadata: BuildMetadata | None = None) -> None:
        self._metadata = metadata if metadata is not None else process_metadata()

    @classmethod
    def from_provider(cls, provider: MetadataProvider) -> "StaticMetadataProvider":
        """Take a single reading from *provider* and freeze it."""
        return cls(provider.current())

    def current(self) -> BuildMetadata:
        return self._metadata


class ContainerMetadataProvider(MetadataProvider):
    """Deprecated per-call container introspection.

    *inspect* returns a mapping keyed like :meth:`BuildMetadata.as_fields`
    (``image``, ``instance`` ...).  Wrap it with
    :meth:`StaticMetadataProvider.from_provider` to query the runtime once
    instead of on every call.
    """

    def __init__(
        self,
        inspect: Callable[[], Mapping[str, Any]],
        name: str = "container",
    ) -> None:
        warnings.warn(
            "ContainerMetadataProvider queries the container runtime on every "
            "log call; use StaticMetadataProvider instead",
            DeprecationWarning,
            stacklevel=2,
        )
        self._inspect = inspect
        self._name = name

    def fetch(self) -> BuildMetadata:
        """Query the runtime.

        Raises
        ------
        MetadataProviderError
            When the introspection call fails or returns something other
            than a mapping.
        """
        try:
            data = self._inspect()
        except Exception as exc:
            raise MetadataProviderError(self._name, f"{self._name} introspection failed: {exc}", cause=exc) from exc
        if not isinstance(data, Mapping):
            raise MetadataProviderError(
                self._name,
                f"{self._name} introspection returned {type(data).__name__}, expected a mapping",
            )
        return BuildMetadata.from_mapping(data)

    def current(self) -> BuildMetadata:
        try:
            return self.fetch()
        except MetadataProviderError as exc:
            logger.debug("metadata unavailable: %s", exc.message)
            return BuildMetadata()


__all__ = [
    "BuildMetadata",
    "ContainerMetadataProvider",
    "ENV_SOURCES",
    "MetadataProvider",
    "StaticMetadataProvider",
    "process_metadata",
]
