"""Configuration management for evidence-duckdb.

Handles the database filename environment variables, path construction
and access mode for a filename, and the optional TOML config file with
named profiles.

Filename precedence for the CLI (highest to lowest):
1. --filename flag
2. Environment variables (EVIDENCE_DUCKDB_FILENAME, DUCKDB_FILENAME,
   then the deprecated ``filename`` and ``FILENAME``)
3. Named profile (--profile, EVIDENCE_DUCKDB_PROFILE or default_profile)
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any, NamedTuple

from pydantic import BaseModel, field_validator

from evidence_duckdb.core.exceptions import ConfigError
from evidence_duckdb.core.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "evidence-duckdb" / "config.toml"

MEMORY_DATABASE = ":memory:"
DB_FILE_MARKERS = (".db", ".duckdb")
# Database files are resolved against the project root, two levels above
# the directory the adapter runs from.
DEFAULT_BASE_DIR = "../.."

PROFILE_ENV = "EVIDENCE_DUCKDB_PROFILE"

_VALID_FORMATS = {"auto", "table", "json", "csv"}


class EnvKey(NamedTuple):
    key: str
    deprecated: bool


FILENAME_ENV_KEYS: tuple[EnvKey, ...] = (
    EnvKey("EVIDENCE_DUCKDB_FILENAME", deprecated=False),
    EnvKey("DUCKDB_FILENAME", deprecated=False),
    EnvKey("filename", deprecated=True),
    EnvKey("FILENAME", deprecated=True),
)


def lookup_env_filename(
    environ: Mapping[str, str] | None = None,
) -> tuple[str, str] | None:
    """Return ``(key, value)`` for the first defined filename variable."""
    if environ is None:
        environ = os.environ
    for env_key in FILENAME_ENV_KEYS:
        value = environ.get(env_key.key)
        if value is None:
            continue
        if env_key.deprecated:
            preferred = FILENAME_ENV_KEYS[0].key
            get_logger(__name__).warning(
                "deprecated environment variable",
                key=env_key.key,
                use_instead=preferred,
            )
        return env_key.key, value
    return None


def get_env_filename(environ: Mapping[str, str] | None = None) -> str | None:
    found = lookup_env_filename(environ)
    return found[1] if found else None


def resolve_database_path(filename: str) -> str:
    """Map a filename to the path handed to DuckDB.

    Names containing a database file marker are relative to
    DEFAULT_BASE_DIR; anything else (including ``:memory:``) is used as is.
    """
    if any(marker in filename for marker in DB_FILE_MARKERS):
        return f"{DEFAULT_BASE_DIR}/{filename}"
    return filename


def is_read_only(filename: str) -> bool:
    """Only the in-memory database is opened read-write."""
    return filename != MEMORY_DATABASE


class DuckDBProfile(BaseModel):
    filename: str


class AppConfig(BaseModel):
    default_format: str = "auto"
    default_profile: str | None = None
    profiles: dict[str, DuckDBProfile] = {}

    @field_validator("default_format")
    @classmethod
    def validate_default_format(cls, v: str) -> str:
        if v not in _VALID_FORMATS:
            msg = f"Invalid default_format: '{v}'. Must be one of: {', '.join(sorted(_VALID_FORMATS))}"
            raise ValueError(msg)
        return v


class ResolvedConfig(BaseModel):
    filename: str | None = None
    default_format: str = "auto"
    active_profile: str | None = None
    sources: dict[str, str] = {}

    @property
    def database_path(self) -> str | None:
        if self.filename is None:
            return None
        return resolve_database_path(self.filename)

    @property
    def read_only(self) -> bool | None:
        if self.filename is None:
            return None
        return is_read_only(self.filename)


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from TOML file.

    Returns default AppConfig if file doesn't exist.
    Raises ConfigError on malformed TOML or invalid config.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Malformed TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return AppConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid configuration in {config_path}: {e}"
        raise ConfigError(msg) from e


def resolve_config(
    config: AppConfig,
    profile_name: str | None = None,
    filename: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> ResolvedConfig:
    """Resolve configuration using precedence chain.

    CLI > env > profile > config defaults > built-in defaults.
    """
    if environ is None:
        environ = os.environ
    sources: dict[str, str] = {}
    resolved: dict[str, Any] = {"filename": None, "default_format": "auto"}
    for key in resolved:
        sources[key] = "default"

    # Layer 1: Config file global defaults
    if config.default_format != "auto":
        resolved["default_format"] = config.default_format
        sources["default_format"] = "config"

    # Layer 2: Named profile
    effective_profile = (
        profile_name or environ.get(PROFILE_ENV) or config.default_profile
    )
    if effective_profile:
        if effective_profile not in config.profiles:
            available = (
                ", ".join(sorted(config.profiles.keys())) if config.profiles else "none"
            )
            msg = f"Unknown profile: '{effective_profile}'. Available profiles: {available}"
            raise ConfigError(msg)
        resolved["filename"] = config.profiles[effective_profile].filename
        sources["filename"] = f"profile: {effective_profile}"

    # Layer 3: Environment variables
    found = lookup_env_filename(environ)
    if found is not None:
        env_key, value = found
        resolved["filename"] = value
        sources["filename"] = f"env: {env_key}"

    # Layer 4: CLI flag (highest priority)
    if filename is not None:
        resolved["filename"] = filename
        sources["filename"] = "cli: --filename"

    resolved["active_profile"] = effective_profile
    resolved["sources"] = sources
    return ResolvedConfig(**resolved)
