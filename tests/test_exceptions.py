"""Tests for exception hierarchy and exit codes."""

import pytest

from evidence_duckdb.core.exceptions import (
    ConfigError,
    EvidenceDuckDBError,
    ExecutionError,
    InputError,
)
from evidence_duckdb.core.exit_codes import ExitCode


@pytest.mark.unit
class TestExitCodes:
    def test_exit_code_values(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
        assert ExitCode.USAGE_ERROR == 2
        assert ExitCode.INPUT_ERROR == 3
        assert ExitCode.OUTPUT_ERROR == 4
        assert ExitCode.DATABASE_ERROR == 5
        assert ExitCode.CONFIG_ERROR == 6
        assert ExitCode.INTERRUPTED == 130

    def test_exit_code_is_int(self):
        for code in ExitCode:
            assert isinstance(code, int)


@pytest.mark.unit
class TestEvidenceDuckDBError:
    def test_base_exception(self):
        err = EvidenceDuckDBError("test error")
        assert str(err) == "test error"
        assert err.message == "test error"
        assert err.exit_code == ExitCode.GENERAL_ERROR

    def test_is_exception(self):
        assert issubclass(EvidenceDuckDBError, Exception)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("exc_class", "exit_code"),
    [
        (ExecutionError, ExitCode.DATABASE_ERROR),
        (InputError, ExitCode.INPUT_ERROR),
        (ConfigError, ExitCode.CONFIG_ERROR),
    ],
)
def test_subclass_exit_codes(exc_class, exit_code):
    err = exc_class("failed")
    assert err.exit_code == exit_code
    assert err.message == "failed"
    assert isinstance(err, EvidenceDuckDBError)


@pytest.mark.unit
def test_catch_all_by_base():
    for exc_class in [ExecutionError, InputError, ConfigError]:
        with pytest.raises(EvidenceDuckDBError):
            raise exc_class("test")


@pytest.mark.unit
class TestExitCodeForException:
    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (ExecutionError("boom"), ExitCode.DATABASE_ERROR),
            (ConfigError("no filename"), ExitCode.CONFIG_ERROR),
            (InputError("no query"), ExitCode.INPUT_ERROR),
            (EvidenceDuckDBError("base"), ExitCode.GENERAL_ERROR),
            (KeyboardInterrupt(), ExitCode.INTERRUPTED),
            (RuntimeError("unexpected"), ExitCode.GENERAL_ERROR),
        ],
    )
    def test_maps_exception_to_exit_code(self, exc, expected):
        assert ExitCode.for_exception(exc) is expected

    def test_unknown_exit_code_attribute_is_general_error(self):
        err = RuntimeError("odd")
        err.exit_code = 42
        assert ExitCode.for_exception(err) is ExitCode.GENERAL_ERROR
