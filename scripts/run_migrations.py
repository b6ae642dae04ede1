#!/usr/bin/env python3
"""Upgrade the code verifier and access token tables to the latest revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from customer_account.config import Settings
from customer_account.util.logging import setup_logging
from customer_account.util.observability import configure_logfire


def main(revision: str = "head") -> int:
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
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
