"""Config – key-value configuration sources.

The logger reads ``server.name`` through a :class:`ConfigSource` on every
call, so a source that is updated at runtime is reflected in the next entry.
Lookups follow viper semantics: a missing key reads as ``""`` and
non-string values are cast with :func:`str`.
"""
from __future__ import annotations

import abc
import os
import threading
from collections.abc import Mapping
from typing import Any

_MISSING = object()


class ConfigSource(abc.ABC):
    """Port: read string values by dotted key."""

    @abc.abstractmethod
    def get(self, key: str) -> Any:
        """Return the raw value for *key*, or ``None`` when absent."""

    def get_string(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)


class DictConfigSource(ConfigSource):
    """In-memory source over a (possibly nested) mapping.

    ``get("server.name")`` resolves ``{"server": {"name": ...}}`` as well as a
    flat ``{"server.name": ...}`` entry; the flat key wins when both exist.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Any:
        data = self._data
        if key in data:
            return data[key]
        node: Any = data
        for part in key.split("."):
            if not isinstance(node, Mapping):
                return None
            node = node.get(part, _MISSING)
            if node is _MISSING:
                return None
        return node

    def set(self, key: str, value: Any) -> None:
        """Set *key* (flat form); visible to the next :meth:`get`."""
        with self._lock:
            updated = dict(self._data)
            updated[key] = value
            self._data = updated


class EnvConfigSource(ConfigSource):
    """Reads dotted keys from the environment: ``server.name`` -> ``SERVER_NAME``."""

    def __init__(self, prefix: str = "", environ: Mapping[str, str] | None = None) -> None:
        self._prefix = prefix
        self._environ = environ

    def env_key(self, key: str) -> str:
        name = key.replace(".", "_").replace("-", "_")
        if self._prefix:
            name = f"{self._prefix}_{name}"
        return name.upper()

    def get(self, key: str) -> Any:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(self.env_key(key))


class ChainConfigSource(ConfigSource):
    """Returns the first non-empty value from *sources*, in order."""

    def __init__(self, *sources: ConfigSource) -> None:
        self._sources = sources

    def get(self, key: str) -> Any:
        for source in self._sources:
            value = source.get(key)
            if value not in (None, ""):
                return value
        return None


__all__ = ["ChainConfigSource", "ConfigSource", "DictConfigSource", "EnvConfigSource"]
