"""DuckDB client for evidence-duckdb.

Wraps a single duckdb connection with query execution and exception
mapping to the EvidenceDuckDBError hierarchy.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import duckdb
import sentry_sdk

from evidence_duckdb.core.exceptions import ExecutionError
from evidence_duckdb.core.logging import get_logger

if TYPE_CHECKING:
    from evidence_duckdb.core.models import Row


class DuckDBClient:
    """Synchronous DuckDB client owning one connection."""

    def __init__(self, path: str, read_only: bool = True) -> None:
        self.path = path
        self.read_only = read_only
        self._connection: duckdb.DuckDBPyConnection | None = None

    def __enter__(self) -> DuckDBClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _connect(self) -> duckdb.DuckDBPyConnection:
        if self._connection is not None:
            return self._connection

        log = get_logger(__name__)
        log.debug("opening database", path=self.path, read_only=self.read_only)
        try:
            self._connection = duckdb.connect(self.path, read_only=self.read_only)
        except duckdb.Error as e:
            log.error("could not open database", path=self.path, error=str(e))
            raise ExecutionError(str(e)) from e

        return self._connection

    def execute_query(self, sql: str) -> list[Row]:
        """Execute SQL and return the rows as dicts keyed by column name."""
        log = get_logger(__name__)
        conn = self._connect()

        sql_normalized = " ".join(sql.split())
        span_description = sql_normalized[:100]
        log.debug("executing query", sql=sql_normalized)
        with sentry_sdk.start_span(op="db.query", description=span_description) as span:
            start_time = time.monotonic()
            try:
                cursor = conn.execute(sql)
                rows: list[Row] = []
                if cursor.description:
                    names = [desc[0] for desc in cursor.description]
                    rows = [dict(zip(names, values)) for values in cursor.fetchall()]
            except duckdb.Error as e:
                span.set_status("internal_error")
                log.error("query failed", sql=sql_normalized, error=str(e))
                raise ExecutionError(str(e)) from e

            duration_ms = (time.monotonic() - start_time) * 1000
            span.set_data("row_count", len(rows))
            span.set_data("duration_ms", duration_ms)
            log.debug(
                "query complete",
                duration_ms=f"{duration_ms:.1f}",
                row_count=len(rows),
            )
            return rows

    def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
