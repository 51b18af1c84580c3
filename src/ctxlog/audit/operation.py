"""Audit – OperationLog record and collection naming."""
from __future__ import annotations

import dataclasses
import time
from collections.abc import Mapping
from typing import Any, ClassVar

from ctxlog.observability.correlation import RequestContext


class CollectionNaming:
    """Mixin deriving storage names from ``prefix + model_name + suffix``."""

    collection_prefix: ClassVar[str] = ""
    collection_suffix: ClassVar[str] = ""
    model_name: ClassVar[str] = ""

    @classmethod
    def resource_name(cls) -> str:
        return cls.model_name

    @classmethod
    def collection_name(cls) -> str:
        return f"{cls.collection_prefix}{cls.model_name}{cls.collection_suffix}"


@dataclasses.dataclass
class OperationLog(CollectionNaming):
    """One audited operation, stored in ``auth_operation_log``.

    ``id`` is assigned by the store; it is written as ``_id`` and left out of
    the document while unset so the store can generate it.
    """

    collection_prefix: ClassVar[str] = "auth_"
    collection_suffix: ClassVar[str] = "_log"
    model_name: ClassVar[str] = "operation"

    id: str | None = None
    timestamp: int = 0
    client_ip: str = ""
    remote_ip: str = ""
    full_path: str = ""
    method: str = ""
    resp_code: int = 0
    target_id: str = ""
    device: str = ""
    operator: str = ""
    user_id: str = ""
    account_id: str = ""
    before: str = ""
    after: str = ""

    @classmethod
    def from_request_context(
        cls,
        ctx: RequestContext | None,
        **fields: Any,
    ) -> "OperationLog":
        """Pre-fill ``client_ip`` and ``operator`` from *ctx*; *fields* win."""
        values: dict[str, Any] = {"timestamp": int(time.time())}
        if ctx is not None:
            if ctx.client_ip:
                values["client_ip"] = ctx.client_ip
            if ctx.operator_id:
                values["operator"] = ctx.operator_id
        values.update(fields)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """JSON representation (``id`` key, always present)."""
        return dataclasses.asdict(self)

    def to_document(self) -> dict[str, Any]:
        """Storage representation (``_id`` key, omitted while empty)."""
        doc = dataclasses.asdict(self)
        record_id = doc.pop("id")
        if record_id:
            doc = {"_id": record_id, **doc}
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "OperationLog":
        names = {f.name for f in dataclasses.fields(cls)} - {"id"}
        values = {k: v for k, v in doc.items() if k in names}
        record_id = doc.get("_id", doc.get("id"))
        return cls(id=str(record_id) if record_id is not None else None, **values)


__all__ = ["CollectionNaming", "OperationLog"]
