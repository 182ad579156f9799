"""Where the CLI gets its SQL from.

``-e`` wins over a file argument, which wins over piped stdin. A file
argument of ``-`` reads stdin explicitly, even from a terminal.
"""

from __future__ import annotations

import sys
from pathlib import Path

from evidence_duckdb.core.exceptions import InputError

STDIN_MARKER = "-"


def _read_stdin() -> str:
    return sys.stdin.read()


def resolve_query_source(inline: str | None, file_path: str | None) -> str:
    """Return the SQL text, raising InputError when there is none."""
    if inline is not None:
        return inline

    if file_path == STDIN_MARKER:
        return _read_stdin()

    if file_path is not None:
        sql_file = Path(file_path)
        if not sql_file.is_file():
            msg = (
                f"Query file not found: {file_path}\n"
                "Use -e for inline queries or pipe the query via stdin."
            )
            raise InputError(msg)
        return sql_file.read_text(encoding="utf-8")

    if not sys.stdin.isatty():
        return _read_stdin()

    msg = "No query provided. Use -e, a SQL file, or pipe to stdin."
    raise InputError(msg)
