"""Row normalization for DuckDB results.

DuckDB returns BIGINT/HUGEINT/UBIGINT columns as Python ints of any size.
Downstream consumers work with double-precision numbers, so integers that
cannot be represented exactly as a float are converted to one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from evidence_duckdb.core.models import Row

# Largest integer a float64 holds without losing precision (2**53 - 1).
MAX_SAFE_INTEGER = 9_007_199_254_740_991


def is_large_int(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return abs(value) > MAX_SAFE_INTEGER


def convert_large_int(value: Any) -> Any:
    """Convert a large integer to float; return anything else unchanged."""
    if is_large_int(value):
        return float(value)
    return value


def normalize_rows(rows: list[Row]) -> list[Row]:
    """Convert large integers in every row, in place.

    Returns the same list so the call can be chained.
    """
    for row in rows:
        for key in row:
            row[key] = convert_large_int(row[key])
    return rows
