"""Shared CLI plumbing for command modules.

Config resolution, format-option handling and output helpers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from evidence_duckdb.cli.output import get_formatter, write_output
from evidence_duckdb.core.config import load_config, resolve_config

if TYPE_CHECKING:
    import typer

    from evidence_duckdb.core.config import ResolvedConfig
    from evidence_duckdb.core.models import QueryResult


def get_resolved_config(ctx: typer.Context) -> ResolvedConfig:
    obj = ctx.ensure_object(dict)
    config = load_config(obj.get("config_file"))
    return resolve_config(
        config,
        profile_name=obj.get("profile"),
        filename=obj.get("filename"),
    )


def format_options(ctx: typer.Context, resolved: ResolvedConfig) -> dict[str, Any]:
    obj = ctx.ensure_object(dict)
    return {
        "format_flag": obj.get("format"),
        "default_format": resolved.default_format,
        "compact": obj.get("compact", False),
        "width": obj.get("width", 40),
        "no_header": obj.get("no_header", False),
    }


def output_result(
    ctx: typer.Context, resolved: ResolvedConfig, result: QueryResult
) -> None:
    formatter = get_formatter(**format_options(ctx, resolved))
    write_output(formatter, result)
