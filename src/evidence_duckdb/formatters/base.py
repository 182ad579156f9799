"""Formatter protocol and registry for output formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from evidence_duckdb.core.models import EvidenceType, QueryResult


@runtime_checkable
class Formatter(Protocol):
    """Turns a QueryResult into lines of output text."""

    def format(self, result: QueryResult) -> Iterator[str]: ...


class FormatterRegistry:
    """Registry for looking up formatters by name."""

    def __init__(self) -> None:
        self._formatters: dict[str, type[Formatter]] = {}

    def register(self, name: str, formatter_class: type[Formatter]) -> None:
        self._formatters[name] = formatter_class

    def get(self, name: str, **kwargs: Any) -> Formatter:
        """Return a formatter instance by name.

        Raises KeyError if the format name is not registered.
        """
        if name not in self._formatters:
            available = ", ".join(sorted(self._formatters))
            msg = f"Unknown format {name!r}. Available: {available}"
            raise KeyError(msg)
        return self._formatters[name](**kwargs)

    @property
    def available(self) -> list[str]:
        return sorted(self._formatters)


def cell_text(value: Any) -> str:
    """Plain-text rendering of a cell; NULL becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def output_columns(result: QueryResult) -> list[tuple[str, EvidenceType | None]]:
    """Columns to render: typed ones in order, then any other row keys.

    Inference stops once every key of the first row is typed, so a key
    that only shows up in later rows has no type. It is still rendered,
    with ``None`` for its type, in order of first appearance.
    """
    columns: dict[str, EvidenceType | None] = {
        col.name: col.evidence_type for col in result.column_types
    }
    for row in result.rows:
        for name in row:
            columns.setdefault(name, None)
    return list(columns.items())


registry = FormatterRegistry()
