"""evidence-duckdb main entry point and command registration."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import sentry_sdk
import typer

from evidence_duckdb.__about__ import __version__
from evidence_duckdb.cli.commands.config import config_app
from evidence_duckdb.cli.commands.query import query_command
from evidence_duckdb.cli.output import OutputFormat  # noqa: TC001
from evidence_duckdb.core.exceptions import EvidenceDuckDBError
from evidence_duckdb.core.exit_codes import ExitCode
from evidence_duckdb.core.logging import setup_logging
from evidence_duckdb.core.monitoring import setup_sentry

app = typer.Typer(
    help="evidence-duckdb - run DuckDB queries with evidence column types",
    no_args_is_help=True,
)

app.add_typer(config_app, name="config")
app.command("query")(query_command)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"evidence-duckdb {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable verbose logging"),
    ] = False,
    filename: Annotated[
        str | None,
        typer.Option("--filename", "-F", help="DuckDB file or :memory:"),
    ] = None,
    profile: Annotated[
        str | None,
        typer.Option("--profile", "-P", help="Named database profile"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config file"),
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format: table|json|csv"),
    ] = None,
    table: Annotated[
        bool,
        typer.Option("--table", help="Shorthand for --format table"),
    ] = False,
    compact: Annotated[
        bool,
        typer.Option("--compact", help="Compact JSON output (no indentation)"),
    ] = False,
    width: Annotated[
        int,
        typer.Option("--width", help="Column width for table format"),
    ] = 40,
    no_header: Annotated[
        bool,
        typer.Option("--no-header", help="Suppress header row in CSV output"),
    ] = False,
) -> None:
    """evidence-duckdb - run DuckDB queries with evidence column types."""
    setup_logging(verbose)
    setup_sentry()

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["filename"] = filename
    ctx.obj["profile"] = profile
    ctx.obj["config_file"] = config_file

    fmt = "table" if table else (format.value if format else None)
    ctx.obj["format"] = fmt
    ctx.obj["compact"] = compact
    ctx.obj["width"] = width
    ctx.obj["no_header"] = no_header


def run() -> None:
    """Entry point with global error handling."""
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt as e:
        raise SystemExit(ExitCode.for_exception(e)) from None
    except Exception as e:
        sentry_sdk.capture_exception(e)
        message = e.message if isinstance(e, EvidenceDuckDBError) else str(e)
        typer.echo(f"Error: {message}", err=True)
        raise SystemExit(ExitCode.for_exception(e)) from None
