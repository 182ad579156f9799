"""DuckDB data source adapter with column type inference."""

from evidence_duckdb.__about__ import __version__
from evidence_duckdb.core.runner import run_query

__all__ = ["__version__", "run_query"]
