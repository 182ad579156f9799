"""Shared test fixtures for evidence-duckdb."""

import datetime
from decimal import Decimal
from pathlib import Path
from tempfile import TemporaryDirectory

import duckdb
import pytest
from typer.testing import CliRunner

from evidence_duckdb.cli.main import app
from evidence_duckdb.core.config import FILENAME_ENV_KEYS, PROFILE_ENV
from evidence_duckdb.core.inference import infer_column_types
from evidence_duckdb.core.logging import LOG_LEVEL_ENV
from evidence_duckdb.core.models import QueryResult
from evidence_duckdb.core.monitoring import SENTRY_DSN_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of filename resolution."""
    for env_key in FILENAME_ENV_KEYS:
        monkeypatch.delenv(env_key.key, raising=False)
    monkeypatch.delenv(PROFILE_ENV, raising=False)
    monkeypatch.delenv(SENTRY_DSN_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@pytest.fixture
def runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def no_config(temp_dir):
    """CLI args pointing at a config file that does not exist."""
    return ["--config", str(temp_dir / "missing.toml")]


@pytest.fixture
def cli_runner(runner, no_config):
    """Invoke the CLI app with the given arguments and no user config."""

    def invoke(*args: str, **kwargs):
        return runner.invoke(app, [*no_config, *args], **kwargs)

    return invoke


@pytest.fixture
def temp_dir():
    """Temporary directory for test files."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_db(tmp_path, monkeypatch):
    """A DuckDB file two levels above the working directory.

    Returns the filename as it should be passed to run_query().
    """
    con = duckdb.connect(str(tmp_path / "people.duckdb"))
    con.execute(
        "CREATE TABLE people (id INTEGER, name VARCHAR, born DATE, active BOOLEAN)"
    )
    con.execute(
        "INSERT INTO people VALUES "
        "(1, 'ada', DATE '1815-12-10', true), "
        "(2, 'alan', NULL, false)"
    )
    con.close()

    workdir = tmp_path / "pages" / "report"
    workdir.mkdir(parents=True)
    monkeypatch.chdir(workdir)
    return "people.duckdb"


@pytest.fixture
def make_result():
    """Build a QueryResult with inferred column types from plain rows."""

    def _make(rows=None):
        if rows is None:
            rows = [{"id": 1, "name": "alice"}, {"id": 2, "name": "bob"}]
        column_types = infer_column_types(rows) if rows else []
        return QueryResult(rows=rows, column_types=column_types)

    return _make


@pytest.fixture
def mixed_rows():
    return [
        {
            "day": datetime.date(2024, 3, 1),
            "amount": Decimal("9.90"),
            "flag": True,
            "note": None,
        }
    ]
