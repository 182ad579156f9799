"""Sentry integration for error tracking and performance monitoring.

Sentry is only initialized when a DSN is configured; without one the
sentry_sdk calls made elsewhere (spans, capture_exception) are no-ops.
"""

import os

import sentry_sdk

from evidence_duckdb.__about__ import __version__

SENTRY_DSN_ENV = "EVIDENCE_DUCKDB_SENTRY_DSN"


def setup_sentry(environment: str = "local") -> bool:
    """Initialize Sentry from the environment. Returns True if enabled."""
    dsn = os.environ.get(SENTRY_DSN_ENV)
    if not dsn:
        return False
    sentry_sdk.init(
        dsn=dsn,
        traces_sample_rate=0.03,
        environment=environment,
        release=__version__,
        attach_stacktrace=True,
        send_default_pii=False,
    )
    return True
