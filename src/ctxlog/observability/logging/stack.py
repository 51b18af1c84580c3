"""Observability – stack capture for error entries."""
from __future__ import annotations

import inspect
import sys
import threading
import traceback
from collections.abc import Iterable
from types import FrameType

STACKTRACE_KEY = "stacktrace"

LIBRARY_PACKAGES = ("structlog", "ctxlog")
"""Packages whose frames never start a captured stack."""


def _thread_names() -> dict[int | None, str]:
    return {t.ident: t.name for t in threading.enumerate()}


def _format_thread(ident: int | None, name: str, frame: FrameType) -> str:
    header = f"thread {name} ({ident}) [running]:\n"
    return header + "".join(traceback.format_stack(frame))


def _is_library_frame(frame: FrameType, packages: Iterable[str]) -> bool:
    module = frame.f_globals.get("__name__") or ""
    return any(module == pkg or module.startswith(pkg + ".") for pkg in packages)


def capture_stack(
    skip: int = 1,
    *,
    all_threads: bool = False,
    ignore: Iterable[str] = LIBRARY_PACKAGES,
) -> str:
    """Render the current call stack as text, outermost frame first.

    *skip* counts frames up from this function, like
    :func:`~ctxlog.observability.logging.callsite.resolve_caller`.  Frames of
    the *ignore* packages above that point are dropped as well, so a capture
    made from inside the logging pipeline still ends at application code.
    With *all_threads* the stacks of every other live thread are appended
    after the calling thread's, ordered by thread id.
    """
    ignore = tuple(ignore)
    frame = inspect.currentframe()
    try:
        for _ in range(max(skip, 0)):
            if frame is None:
                break
            frame = frame.f_back
        while frame is not None and _is_library_frame(frame, ignore):
            frame = frame.f_back
        if frame is None:
            return "stack unavailable\n"

        names = _thread_names()
        current = threading.get_ident()
        parts = [_format_thread(current, names.get(current, "unknown"), frame)]
        if all_threads:
            for ident, other in sorted(sys._current_frames().items()):
                if ident == current:
                    continue
                parts.append(_format_thread(ident, names.get(ident, "unknown"), other))
        return "\n".join(parts)
    finally:
        del frame


__all__ = ["LIBRARY_PACKAGES", "STACKTRACE_KEY", "capture_stack"]
