"""CSV formatter for QueryResult output (RFC 4180 compliant)."""

from __future__ import annotations

import csv
from io import StringIO
from typing import TYPE_CHECKING

from evidence_duckdb.formatters.base import cell_text, output_columns, registry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from evidence_duckdb.core.models import QueryResult


def _write_row(values: list[str]) -> str:
    buf = StringIO()
    writer = csv.writer(buf)
    writer.writerow(values)
    return buf.getvalue().rstrip("\r\n")


class CSVFormatter:
    def __init__(self, no_header: bool = False) -> None:
        self.no_header = no_header

    def format(self, result: QueryResult) -> Iterator[str]:
        names = [name for name, _ in output_columns(result)]
        if not self.no_header:
            yield _write_row(names)

        for row in result.rows:
            yield _write_row([cell_text(row.get(name)) for name in names])


registry.register("csv", CSVFormatter)
