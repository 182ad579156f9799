"""Query result models for evidence-duckdb.

Pydantic models for rows, column type descriptors and the connection
descriptor accepted by run_query().
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Row = dict[str, Any]


class EvidenceType(StrEnum):
    NUMBER = "number"
    STRING = "string"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    DATE = "date"


class TypeFidelity(StrEnum):
    """Whether a column type was observed in the data or defaulted."""

    PRECISE = "precise"
    INFERRED = "inferred"


class ColumnType(BaseModel):
    """Evidence type descriptor for a single result column.

    ``type_fidelity`` maps every column name of the result to its fidelity.
    The inferencer hands the same dict object to every descriptor of one
    result, so build these with ``model_construct`` when that identity has
    to survive (validation copies dicts).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    evidence_type: EvidenceType
    type_fidelity: dict[str, TypeFidelity]


class DatabaseDescriptor(BaseModel):
    """Connection descriptor: a DuckDB file path or ``:memory:``."""

    filename: str


class QueryResult(BaseModel):
    """Normalized rows plus inferred column types."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    rows: list[Row]
    column_types: list[ColumnType]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_names(self) -> list[str]:
        return [col.name for col in self.column_types]
