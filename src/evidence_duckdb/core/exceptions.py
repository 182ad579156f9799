"""Exception hierarchy for evidence-duckdb.

All exceptions carry an exit_code for CLI return value mapping.
"""

from evidence_duckdb.core.exit_codes import ExitCode


class EvidenceDuckDBError(Exception):
    """Base exception for all evidence-duckdb errors."""

    exit_code: int = ExitCode.GENERAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ExecutionError(EvidenceDuckDBError):
    """Database could not be opened or the query failed."""

    exit_code: int = ExitCode.DATABASE_ERROR


class InputError(EvidenceDuckDBError):
    """File not found, invalid parameters."""

    exit_code: int = ExitCode.INPUT_ERROR


class ConfigError(EvidenceDuckDBError):
    """Malformed config, missing profile, no database filename."""

    exit_code: int = ExitCode.CONFIG_ERROR
