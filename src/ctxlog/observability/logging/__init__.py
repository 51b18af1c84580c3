"""Observability – context-enriched structured logging."""
from ctxlog.observability.logging.builder import SERVER_NAME_KEY, EntryBuilder
from ctxlog.observability.logging.callsite import CallSite, CallerResolver, resolve_caller
from ctxlog.observability.logging.factory import JsonLoggerFactory, parse_level
from ctxlog.observability.logging.fields import ContextFields, extract_context_fields
from ctxlog.observability.logging.logger import AMBIENT, ContextLogger, LoggerConfig, init
from ctxlog.observability.logging.metadata import (
    BuildMetadata,
    ContainerMetadataProvider,
    MetadataProvider,
    StaticMetadataProvider,
    process_metadata,
)
from ctxlog.observability.logging.processors import ErrorStackProcessor
from ctxlog.observability.logging.stack import STACKTRACE_KEY, capture_stack

__all__ = [
    "AMBIENT",
    "BuildMetadata",
    "CallSite",
    "CallerResolver",
    "ContainerMetadataProvider",
    "ContextFields",
    "ContextLogger",
    "EntryBuilder",
    "ErrorStackProcessor",
    "JsonLoggerFactory",
    "LoggerConfig",
    "MetadataProvider",
    "SERVER_NAME_KEY",
    "STACKTRACE_KEY",
    "StaticMetadataProvider",
    "capture_stack",
    "extract_context_fields",
    "init",
    "parse_level",
    "process_metadata",
    "resolve_caller",
]
