"""Rich table formatter for QueryResult output."""

from __future__ import annotations

import shutil
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from evidence_duckdb.formatters.base import cell_text, output_columns, registry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from evidence_duckdb.core.models import QueryResult

_NO_RESULTS = "No results"


def _truncate(value: str, width: int) -> str:
    if len(value) <= width:
        return value
    return value[: width - 1] + "…"


class TableFormatter:
    def __init__(self, width: int = 40) -> None:
        self.width = width

    def format(self, result: QueryResult) -> Iterator[str]:
        # run_query fails on an empty result before anything is formatted;
        # a QueryResult built by hand may still have no rows.
        if not result.rows:
            yield _NO_RESULTS
            return

        columns = output_columns(result)
        table = Table(show_edge=True, pad_edge=True)
        for name, evidence_type in columns:
            header = f"{name} ({evidence_type})" if evidence_type else name
            table.add_column(header, no_wrap=True)

        for row in result.rows:
            table.add_row(
                *(
                    _truncate(cell_text(row.get(name)), self.width)
                    for name, _ in columns
                )
            )

        buf = StringIO()
        term_width = shutil.get_terminal_size((120, 24)).columns
        console = Console(file=buf, force_terminal=True, width=term_width)
        console.print(table)
        yield buf.getvalue().rstrip("\n")


registry.register("table", TableFormatter)
