"""
ctxlog – context-enriched structured logging.

Import path convention::

    from ctxlog import init
    from ctxlog.observability.correlation import CorrelationContext, RequestContext
    from ctxlog.observability.logging import ContextLogger, LoggerConfig
    from ctxlog.audit import OperationLog
"""

from ctxlog.observability.logging import ContextLogger, LoggerConfig, init

__version__ = "0.1.0"
__all__ = ["ContextLogger", "LoggerConfig", "__version__", "init"]
