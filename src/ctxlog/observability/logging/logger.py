"""Observability – ContextLogger, the enriched logging entry points.

Typical usage::

    from ctxlog import init
    from ctxlog.observability.correlation import CorrelationContext, RequestContext

    log = init("info")                       # JSON lines on stdout

    with CorrelationContext.scope(RequestContext(trace_id="abc123")):
        log.log().info("order created", order_id=42)
        try:
            charge()
        except PaymentError as exc:
            log.error_with_stack(CorrelationContext.get(), exc, "charge failed")

Every entry carries ``server``, ``file`` and ``func``; request fields and
build metadata are added only when present.
"""
from __future__ import annotations

import dataclasses
import functools
import logging
from typing import Any, TextIO

from structlog.typing import FilteringBoundLogger

from ctxlog.config.settings import LoggingSettings
from ctxlog.config.source import ChainConfigSource, ConfigSource, DictConfigSource, EnvConfigSource
from ctxlog.observability.correlation import CorrelationContext
from ctxlog.observability.logging.builder import SERVER_NAME_KEY, EntryBuilder
from ctxlog.observability.logging.callsite import CallerResolver, resolve_caller
from ctxlog.observability.logging.factory import JsonLoggerFactory, parse_level
from ctxlog.observability.logging.metadata import MetadataProvider, StaticMetadataProvider
from ctxlog.observability.logging.stack import STACKTRACE_KEY, capture_stack

logger = logging.getLogger(__name__)


class _Ambient:
    def __repr__(self) -> str:
        return "AMBIENT"


AMBIENT: Any = _Ambient()
"""Default context argument: use the request context active in :class:`CorrelationContext`."""


@dataclasses.dataclass(frozen=True)
class LoggerConfig:
    """Everything a :class:`ContextLogger` needs, fixed at construction.

    Parameters
    ----------
    level:
        ``debug``, ``info``, ``warn`` or ``error``; anything else means ``info``.
    output:
        Text stream receiving one JSON object per line.  ``None`` means stdout.
    config_source:
        Where ``server.name`` is read from on every call.
    metadata_provider:
        Source of build/instance metadata.  Defaults to the process snapshot.
    auto_stack_on_error:
        Attach ``stacktrace`` to every error-level entry, not only to those
        issued through :meth:`ContextLogger.error_with_stack`.
    caller_resolver:
        Call-site resolver; *skip* counts frames from the resolver's own.
    caller_with_parent:
        Emit ``file`` as ``parent/name.py:line`` with the default resolver.
    stack_all_threads:
        Append the stacks of every other live thread to ``stacktrace``.
    """
    level: str = "info"
    output: TextIO | None = None
    config_source: ConfigSource = dataclasses.field(default_factory=EnvConfigSource)
    metadata_provider: MetadataProvider = dataclasses.field(default_factory=StaticMetadataProvider)
    auto_stack_on_error: bool = False
    caller_resolver: CallerResolver = resolve_caller
    caller_with_parent: bool = False
    stack_all_threads: bool = False


def _render(value: Any, as_repr: bool = False) -> str:
    try:
        return repr(value) if as_repr else str(value)
    except Exception as exc:
        logger.debug("unprintable %s in log message: %s", type(value).__name__, exc)
        return object.__repr__(value)


def _describe(err: BaseException | None) -> str:
    if err is None:
        return ""
    return _render(err) or type(err).__name__


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    if not args and "%" not in fmt:
        return fmt
    try:
        return fmt % args
    except Exception as exc:
        logger.debug("bad log format %r: %s", fmt, exc)
        return " ".join([fmt, *(_render(a, as_repr=True) for a in args)])


class ContextLogger:
    """Structured logger that enriches every entry with call-site and context fields.

    Instances are safe to share between threads and asyncio tasks: the only
    state is the immutable configuration and the structlog logger, and every
    call builds its own call site and context fields.
    """

    def __init__(self, config: LoggerConfig | None = None) -> None:
        self._config = config or LoggerConfig()
        self._level = parse_level(self._config.level)
        self._capture = functools.partial(capture_stack, all_threads=self._config.stack_all_threads)
        self._logger = JsonLoggerFactory.create(
            self._config.level,
            self._config.output,
            auto_stack_on_error=self._config.auto_stack_on_error,
            capture=self._capture,
        )
        self._builder = EntryBuilder(
            self._logger,
            self._config.config_source,
            self._config.metadata_provider,
        )
        self._resolve_caller = self._config.caller_resolver
        if self._config.caller_with_parent and self._resolve_caller is resolve_caller:
            self._resolve_caller = functools.partial(resolve_caller, with_parent=True)

    @classmethod
    def from_settings(
        cls,
        settings: LoggingSettings,
        output: TextIO | None = None,
        *,
        config_source: ConfigSource | None = None,
        metadata_provider: MetadataProvider | None = None,
    ) -> "ContextLogger":
        source: ConfigSource = config_source or EnvConfigSource()
        if settings.server_name:
            source = ChainConfigSource(
                DictConfigSource({SERVER_NAME_KEY: settings.server_name}),
                source,
            )
        return cls(
            LoggerConfig(
                level=settings.level,
                output=output,
                config_source=source,
                metadata_provider=metadata_provider or StaticMetadataProvider(),
                auto_stack_on_error=settings.auto_stack_on_error,
            )
        )

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def level(self) -> int:
        """Minimum level as a :mod:`logging` constant."""
        return self._level

    @property
    def builder(self) -> EntryBuilder:
        return self._builder

    def _context(self, ctx: Any) -> Any:
        if ctx is AMBIENT:
            return CorrelationContext.get()
        return ctx

    def log(self, ctx: Any = AMBIENT) -> FilteringBoundLogger:
        """Return a bound logger for the caller; finish it with ``.info(...)`` etc.

        *ctx* defaults to the ambient :class:`RequestContext`; pass ``None``
        to log without request fields.
        """
        call_site = self._resolve_caller(2)
        return self._builder.build(self._context(ctx), call_site)

    def error_with_stack(self, ctx: Any, err: BaseException | None, *args: Any) -> None:
        """Log *err* at error level with the caller's stack attached.

        Without *args* the error text is the message.  Otherwise the error
        goes under ``error`` and the space-joined *args* form the message.
        """
        call_site = self._resolve_caller(2)
        stack = self._capture(2)
        entry = self._builder.build(self._context(ctx), call_site).bind(**{STACKTRACE_KEY: stack})
        if not args:
            entry.error(_describe(err))
            return
        if err is not None:
            entry = entry.bind(error=_describe(err))
        entry.error(" ".join(_render(a) for a in args))

    def errorf_with_stack(self, ctx: Any, err: BaseException | None, fmt: str, *args: Any) -> None:
        """Like :meth:`error_with_stack` with a ``%``-style formatted message.

        A format string that does not match *args* never raises; the raw
        format and arguments are logged instead.  ``%%`` renders as ``%``
        even without *args*.
        """
        call_site = self._resolve_caller(2)
        stack = self._capture(2)
        entry = self._builder.build(self._context(ctx), call_site).bind(**{STACKTRACE_KEY: stack})
        if err is not None:
            entry = entry.bind(error=_describe(err))
        entry.error(_format(fmt, args))


def init(level: str = "info", output: TextIO | None = None, **options: Any) -> ContextLogger:
    """Construct a :class:`ContextLogger`.

    *options* are forwarded to :class:`LoggerConfig`.  Calling ``init`` again
    simply builds another logger; existing instances are unaffected.
    """
    return ContextLogger(LoggerConfig(level=level, output=output, **options))


__all__ = ["AMBIENT", "ContextLogger", "LoggerConfig", "init"]
