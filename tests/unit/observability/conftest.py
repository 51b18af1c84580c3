"""Shared fixtures for the enriched-logger tests."""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from typing import Any

import pytest

from ctxlog.config.source import DictConfigSource
from ctxlog.observability.correlation import CorrelationContext
from ctxlog.observability.logging import (
    BuildMetadata,
    ContextLogger,
    LoggerConfig,
    StaticMetadataProvider,
)


@pytest.fixture(autouse=True)
def _clear_request_context() -> Any:
    CorrelationContext.clear()
    yield
    CorrelationContext.clear()


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def config_source() -> DictConfigSource:
    return DictConfigSource({"server": {"name": "orders-api"}})


@pytest.fixture
def make_logger(
    sink: io.StringIO, config_source: DictConfigSource
) -> Callable[..., ContextLogger]:
    def _make(**overrides: Any) -> ContextLogger:
        options: dict[str, Any] = {
            "level": "debug",
            "output": sink,
            "config_source": config_source,
            "metadata_provider": StaticMetadataProvider(BuildMetadata()),
        }
        options.update(overrides)
        return ContextLogger(LoggerConfig(**options))

    return _make


@pytest.fixture
def read_entries(sink: io.StringIO) -> Callable[[], list[dict[str, Any]]]:
    def _read() -> list[dict[str, Any]]:
        return [json.loads(line) for line in sink.getvalue().splitlines() if line]

    return _read
