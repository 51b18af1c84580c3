"""Audit – persisted operation-log records."""
from ctxlog.audit.operation import CollectionNaming, OperationLog

__all__ = ["CollectionNaming", "OperationLog"]
