"""Tests for the query command against real DuckDB databases."""

import json
from pathlib import Path

import pytest

from evidence_duckdb.core.exceptions import ConfigError, ExecutionError
from evidence_duckdb.core.exit_codes import ExitCode

FIXTURE_SQL = str(Path(__file__).parent.parent / "fixtures" / "select_42.sql")
MEMORY_ARGS = ["--filename", ":memory:"]


@pytest.mark.unit
def test_query_help(cli_runner):
    result = cli_runner("query", "--help")
    assert result.exit_code == 0
    assert "Execute a SQL query" in result.stdout
    assert "--execute" in result.stdout


# -- Output --


@pytest.mark.integration
def test_query_inline_json(cli_runner):
    result = cli_runner(
        *MEMORY_ARGS, "--format", "json", "query", "-e", "SELECT 1 AS a, 'x' AS b"
    )
    assert result.exit_code == 0, f"output: {result.stdout}"
    parsed = json.loads(result.stdout)
    assert parsed["rows"] == [{"a": 1, "b": "x"}]
    assert [c["evidenceType"] for c in parsed["columnTypes"]] == ["number", "string"]


@pytest.mark.integration
def test_query_from_file_csv(cli_runner):
    result = cli_runner(*MEMORY_ARGS, "--format", "csv", "query", FIXTURE_SQL)
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["answer", "42"]


@pytest.mark.integration
def test_query_from_stdin(cli_runner):
    result = cli_runner(
        *MEMORY_ARGS, "--format", "csv", "--no-header", "query", input="SELECT 7 AS n"
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["7"]


@pytest.mark.integration
def test_query_table_format(cli_runner):
    result = cli_runner(*MEMORY_ARGS, "--table", "query", "-e", "SELECT true AS ok")
    assert result.exit_code == 0
    assert "ok (boolean)" in result.stdout


@pytest.mark.integration
def test_query_compact_json(cli_runner):
    result = cli_runner(
        *MEMORY_ARGS, "--format", "json", "--compact", "query", "-e", "SELECT 1 AS a"
    )
    assert result.exit_code == 0
    assert len(result.stdout.strip().splitlines()) == 1


@pytest.mark.integration
def test_query_database_file(cli_runner, project_db):
    result = cli_runner(
        "--filename",
        project_db,
        "--format",
        "csv",
        "query",
        "-e",
        "SELECT name FROM people ORDER BY id",
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["name", "ada", "alan"]


@pytest.mark.integration
def test_query_filename_from_env(cli_runner, monkeypatch):
    monkeypatch.setenv("DUCKDB_FILENAME", ":memory:")
    result = cli_runner("--format", "csv", "query", "-e", "SELECT 3 AS n")
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["n", "3"]


@pytest.mark.integration
def test_query_profile(runner, temp_dir):
    from evidence_duckdb.cli.main import app

    config_path = temp_dir / "config.toml"
    config_path.write_text(
        'default_format = "csv"\n[profiles.scratch]\nfilename = ":memory:"\n'
    )
    result = runner.invoke(
        app,
        [
            "--config",
            str(config_path),
            "--profile",
            "scratch",
            "query",
            "-e",
            "SELECT 'hi' AS greeting",
        ],
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["greeting", "hi"]


# -- Errors --


@pytest.mark.unit
def test_query_file_not_found(cli_runner):
    result = cli_runner(*MEMORY_ARGS, "query", "/nonexistent/file.sql")
    assert result.exit_code == ExitCode.INPUT_ERROR


@pytest.mark.unit
def test_query_without_database(cli_runner):
    result = cli_runner("query", "-e", "SELECT 1")
    assert result.exit_code != 0
    assert isinstance(result.exception, ConfigError)


@pytest.mark.integration
def test_query_engine_error(cli_runner):
    result = cli_runner(*MEMORY_ARGS, "query", "-e", "SELECT * FROM missing_table")
    assert result.exit_code != 0
    assert isinstance(result.exception, ExecutionError)
    assert "missing_table" in result.exception.message
