from __future__ import annotations

import sys
from typing import Annotated

import typer

from evidence_duckdb.cli.commands._shared import get_resolved_config, output_result
from evidence_duckdb.core.exceptions import ConfigError, InputError
from evidence_duckdb.core.exit_codes import ExitCode
from evidence_duckdb.core.models import DatabaseDescriptor
from evidence_duckdb.core.query_source import resolve_query_source
from evidence_duckdb.core.runner import run_query


def query_command(
    ctx: typer.Context,
    file: Annotated[
        str | None,
        typer.Argument(help="SQL file to execute ('-' for stdin)"),
    ] = None,
    execute: Annotated[
        str | None,
        typer.Option("--execute", "-e", help="Execute inline SQL query"),
    ] = None,
) -> None:
    """Execute a SQL query from file, inline (-e), or stdin."""
    try:
        is_tty = sys.stdin.isatty()
    except (ValueError, AttributeError):
        is_tty = False
    if execute is None and file is None and is_tty:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        sql = resolve_query_source(inline=execute, file_path=file)
    except InputError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(ExitCode.INPUT_ERROR) from exc

    resolved = get_resolved_config(ctx)
    if resolved.filename is None:
        msg = "No database given. Use --filename, a profile, or EVIDENCE_DUCKDB_FILENAME."
        raise ConfigError(msg)

    result = run_query(sql, DatabaseDescriptor(filename=resolved.filename))
    output_result(ctx, resolved, result)
