"""Query entry point: open, execute, normalize and type a result."""

from __future__ import annotations

from evidence_duckdb.core.client import DuckDBClient
from evidence_duckdb.core.config import (
    FILENAME_ENV_KEYS,
    get_env_filename,
    is_read_only,
    resolve_database_path,
)
from evidence_duckdb.core.exceptions import ConfigError, ExecutionError
from evidence_duckdb.core.inference import infer_column_types
from evidence_duckdb.core.models import DatabaseDescriptor, QueryResult
from evidence_duckdb.core.normalize import normalize_rows


def _error_message(err: BaseException) -> str:
    message = getattr(err, "message", None)
    if isinstance(message, str):
        return message
    return str(err)


def run_query(
    query_string: str, database: DatabaseDescriptor | None = None
) -> QueryResult:
    """Run ``query_string`` against DuckDB and return typed rows.

    The database comes from ``database.filename`` or, without a descriptor,
    from the filename environment variables. ``:memory:`` is opened
    read-write, everything else read-only.

    Raises:
        ConfigError: No descriptor was given and no filename variable is set.
        ExecutionError: Opening, executing or typing failed. Only the
            message of the underlying error is kept.
    """
    filename = database.filename if database else get_env_filename()
    if filename is None:
        keys = ", ".join(env_key.key for env_key in FILENAME_ENV_KEYS)
        msg = f"No DuckDB filename given. Pass a database or set one of: {keys}"
        raise ConfigError(msg)

    path = resolve_database_path(filename)
    read_only = is_read_only(filename)

    try:
        with DuckDBClient(path, read_only=read_only) as client:
            raw_rows = client.execute_query(query_string)
        rows = normalize_rows(raw_rows)
        return QueryResult(rows=rows, column_types=infer_column_types(rows))
    except Exception as err:
        message = _error_message(err)
        if message:
            raise ExecutionError(message) from None
        raise
