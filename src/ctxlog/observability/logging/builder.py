"""Observability – EntryBuilder.

Composes the bound fields of one log call, in this order:

``server``, ``file``, ``func``, then the present request fields (``trace``,
``ip``, ``merchantId``, ``operator``), then the present build metadata
(``image``, ``git_commit``, ``git_branch``, ``build_time``, ``instance``).
"""
from __future__ import annotations

import logging
from typing import Any

from structlog.typing import FilteringBoundLogger

from ctxlog.config.source import ConfigSource
from ctxlog.observability.logging.callsite import CallSite
from ctxlog.observability.logging.fields import extract_context_fields
from ctxlog.observability.logging.metadata import BuildMetadata, MetadataProvider

logger = logging.getLogger(__name__)

SERVER_NAME_KEY = "server.name"


class EntryBuilder:
    """Binds server, call-site, request and build fields onto a structlog logger.

    ``server.name`` is read from *config_source* on every build so that a
    runtime change shows up in the next entry.
    """

    def __init__(
        self,
        base: FilteringBoundLogger,
        config_source: ConfigSource,
        metadata_provider: MetadataProvider,
    ) -> None:
        self._base = base
        self._config_source = config_source
        self._metadata_provider = metadata_provider

    def server_name(self) -> str:
        try:
            return self._config_source.get_string(SERVER_NAME_KEY)
        except Exception as exc:  # noqa: BLE001
            logger.warning("could not read %s: %s", SERVER_NAME_KEY, exc)
            return ""

    def metadata(self) -> BuildMetadata:
        try:
            return self._metadata_provider.current()
        except Exception as exc:  # noqa: BLE001
            logger.warning("metadata provider failed: %s", exc)
            return BuildMetadata()

    def fields(self, ctx: Any, call_site: CallSite) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "server": self.server_name(),
            "file": call_site.location,
            "func": call_site.function,
        }
        fields.update(extract_context_fields(ctx).as_fields())
        fields.update(self.metadata().as_fields())
        return fields

    def build(self, ctx: Any, call_site: CallSite) -> FilteringBoundLogger:
        return self._base.bind(**self.fields(ctx, call_site))


__all__ = ["EntryBuilder", "SERVER_NAME_KEY"]
