"""Observability – call-site resolution.

:func:`resolve_caller` counts *skip* frames up from its own frame, so
``resolve_caller(0)`` describes the resolver itself, ``resolve_caller(1)`` the
function that called it, and so on.  Nothing is cached; every call walks the
live stack of the calling thread.
"""
from __future__ import annotations

import dataclasses
import inspect
import os
from typing import Protocol

UNKNOWN = "unknown"


@dataclasses.dataclass(frozen=True)
class CallSite:
    """Source location of one log call."""
    file: str
    line: int
    function: str

    @property
    def location(self) -> str:
        """``<file>:<line>``, the value emitted under the ``file`` key."""
        return f"{self.file}:{self.line}"

    @classmethod
    def unknown(cls) -> "CallSite":
        return cls(file=UNKNOWN, line=0, function=UNKNOWN)


class CallerResolver(Protocol):
    """Port: resolve the call site *skip* frames above the resolver."""

    def __call__(self, skip: int = 1) -> CallSite: ...


def short_path(path: str, *, with_parent: bool = False) -> str:
    """Return the file name of *path*, optionally prefixed by its parent directory."""
    head, name = os.path.split(path)
    if with_parent:
        parent = os.path.basename(head)
        if parent:
            return f"{parent}/{name}"
    return name


def short_function_name(qualname: str) -> str:
    """Strip any enclosing class / function qualifier: ``A.<locals>.f`` -> ``f``."""
    return qualname.rsplit(".", 1)[-1]


def resolve_caller(skip: int = 1, *, with_parent: bool = False) -> CallSite:
    """Return the :class:`CallSite` *skip* frames above this function.

    Never raises: when the requested frame does not exist (or the interpreter
    does not expose frames at all) :meth:`CallSite.unknown` is returned.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(max(skip, 0)):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return CallSite.unknown()
        code = frame.f_code
        qualname = getattr(code, "co_qualname", code.co_name)
        return CallSite(
            file=short_path(code.co_filename, with_parent=with_parent),
            line=frame.f_lineno or 0,
            function=short_function_name(qualname),
        )
    finally:
        del frame


__all__ = [
    "CallSite",
    "CallerResolver",
    "UNKNOWN",
    "resolve_caller",
    "short_function_name",
    "short_path",
]
