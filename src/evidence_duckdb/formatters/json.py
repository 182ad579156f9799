"""JSON formatter: rows plus column types in one document."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from evidence_duckdb.formatters.base import registry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from evidence_duckdb.core.models import QueryResult


def _serialize_value(val: Any) -> Any:
    if isinstance(val, (int, float, str, bool, type(None))):
        return val
    if isinstance(val, (bytes, bytearray, memoryview)):
        return bytes(val).hex()
    if isinstance(val, list):
        return [_serialize_value(v) for v in val]
    if isinstance(val, dict):
        return {str(k): _serialize_value(v) for k, v in val.items()}
    # dates, times, Decimal, UUID, timedelta
    if hasattr(val, "isoformat"):
        return val.isoformat()
    return str(val)


class JSONFormatter:
    def __init__(self, compact: bool = False) -> None:
        self.compact = compact

    def format(self, result: QueryResult) -> Iterator[str]:
        document = {
            "rows": [
                {name: _serialize_value(val) for name, val in row.items()}
                for row in result.rows
            ],
            "columnTypes": [
                col.model_dump(mode="json", by_alias=True)
                for col in result.column_types
            ],
        }
        if self.compact:
            yield json.dumps(document, default=str)
        else:
            yield json.dumps(document, indent=2, default=str)


registry.register("json", JSONFormatter)
