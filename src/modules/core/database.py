"""Datastore connectivity probe.

``check_database_connection`` is shared by the health check and by the
process start-up path.  ``ensure_database_or_exit`` is the start-up
variant: a failed probe is fatal and terminates the process without retry.
"""

from __future__ import annotations

import sys
import time

import structlog
from django.db import DatabaseError, connections

logger = structlog.get_logger(__name__)


def check_database_connection(alias: str = "default") -> float:
    """Borrow a connection, run ``SELECT 1`` and return the elapsed ms.

    Raises:
        DatabaseError: if the datastore cannot be reached.
    """
    start = time.monotonic()
    conn = connections[alias]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return round((time.monotonic() - start) * 1000, 2)


def ensure_database_or_exit(alias: str = "default") -> None:
    """Probe the datastore at start-up; exit with status 1 when it is down."""
    try:
        elapsed_ms = check_database_connection(alias)
    except DatabaseError as exc:
        logger.critical(
            "database.connection_failed",
            alias=alias,
            error=str(exc),
            hint="Ensure the database server is running and reachable.",
        )
        sys.exit(1)
    finally:
        connections[alias].close()
    logger.info("database.connected", alias=alias, response_time_ms=elapsed_ms)
