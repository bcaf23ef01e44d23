#!/usr/bin/env python3
"""Apply Alembic migrations to the guestbook database.

The target database comes from DATABASE__URL (see migrations/env.py).
Failures are reported to Logfire and re-raised so a deploy step stops
before the app starts against a stale schema.

Usage:
    python scripts/run_migrations.py [revision]
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from guestbook.config import Settings
from guestbook.util.logging import setup_logging
from guestbook.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema to `revision`."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database schema at {revision}", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
