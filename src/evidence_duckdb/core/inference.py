"""Column type inference for query results.

Maps Python values returned by DuckDB to evidence types and derives one
type per column from the first rows that carry a usable value.
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from evidence_duckdb.core.models import ColumnType, EvidenceType, TypeFidelity
from evidence_duckdb.core.normalize import is_large_int

if TYPE_CHECKING:
    from evidence_duckdb.core.models import Row


def native_type_to_evidence_type(value: Any) -> EvidenceType | None:
    """Return the evidence type for a value, or None if undetermined.

    None, and objects without an evidence counterpart (lists, structs,
    blobs, UUIDs, intervals), give no type information.
    """
    # bool first: it is an int subclass
    if isinstance(value, bool):
        return EvidenceType.BOOLEAN
    if isinstance(value, int):
        return EvidenceType.BIGINT if is_large_int(value) else EvidenceType.NUMBER
    if isinstance(value, (float, Decimal)):
        return EvidenceType.NUMBER
    if isinstance(value, str):
        return EvidenceType.STRING
    # datetime.datetime is a datetime.date subclass
    if isinstance(value, (datetime.date, datetime.time)):
        return EvidenceType.DATE
    return None


def infer_column_types(rows: list[Row]) -> list[ColumnType]:
    """Infer one ColumnType per column seen while scanning ``rows``.

    Rows are scanned in order until the number of typed columns equals the
    number of columns in the current row. Columns of the first row that are
    still untyped default to ``string`` with ``inferred`` fidelity; untyped
    columns missing from the first row are left out.

    All returned descriptors share a single ``type_fidelity`` dict.

    Raises:
        ValueError: If ``rows`` is empty.
    """
    if not rows:
        msg = "cannot infer column types from an empty result"
        raise ValueError(msg)

    data_types: dict[str, EvidenceType] = {}
    type_fidelity: dict[str, TypeFidelity] = {}

    for row in rows:
        for name, value in row.items():
            if name in data_types:
                continue
            evidence_type = native_type_to_evidence_type(value)
            if evidence_type is not None:
                data_types[name] = evidence_type
                type_fidelity[name] = TypeFidelity.PRECISE

        # Compares counts, not names.
        if len(data_types) == len(row):
            break

    for name in rows[0]:
        if name not in data_types:
            data_types[name] = EvidenceType.STRING
            type_fidelity[name] = TypeFidelity.INFERRED

    return [
        ColumnType.model_construct(
            name=name, evidence_type=evidence_type, type_fidelity=type_fidelity
        )
        for name, evidence_type in data_types.items()
    ]
