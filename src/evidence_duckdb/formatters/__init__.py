"""Output formatters for evidence-duckdb."""

from evidence_duckdb.formatters.base import Formatter, FormatterRegistry, registry
from evidence_duckdb.formatters.csv import CSVFormatter
from evidence_duckdb.formatters.json import JSONFormatter
from evidence_duckdb.formatters.table import TableFormatter

__all__ = [
    "CSVFormatter",
    "Formatter",
    "FormatterRegistry",
    "JSONFormatter",
    "TableFormatter",
    "registry",
]
