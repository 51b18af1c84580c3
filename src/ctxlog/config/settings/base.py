"""Config settings – Settings base class and LoggingSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logger settings read from ``LOG_LEVEL``, ``LOG_AUTO_STACK_ON_ERROR``
    and ``LOG_SERVER_NAME``.

    ``level`` is passed through verbatim; unknown names fall back to
    ``info`` when the logger is built, so no validation happens here.
    """

    _prefix: ClassVar[str] = "LOG"

    level: str = "info"
    auto_stack_on_error: bool = False
    server_name: str = ""


__all__ = ["LoggingSettings", "Settings"]
