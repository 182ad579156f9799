"""Process exit statuses of the evidence-duckdb CLI."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INPUT_ERROR = 3
    OUTPUT_ERROR = 4
    DATABASE_ERROR = 5
    CONFIG_ERROR = 6
    INTERRUPTED = 130  # 128 + SIGINT

    @classmethod
    def for_exception(cls, exc: BaseException) -> ExitCode:
        """Exit status for an exception escaping the CLI.

        EvidenceDuckDBError subclasses carry their own ``exit_code``;
        anything else is a general error.
        """
        if isinstance(exc, KeyboardInterrupt):
            return cls.INTERRUPTED
        code = getattr(exc, "exit_code", None)
        if isinstance(code, int) and code in cls._value2member_map_:
            return cls(code)
        return cls.GENERAL_ERROR
