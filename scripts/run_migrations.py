#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c0d2a9b7e
    python scripts/run_migrations.py --sql      # print SQL instead of running it
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from quill.config import Settings
from quill.util.logging import setup_logging
from quill.util.observability import configure_logfire


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Upgrade the Quill database schema")
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--sql", action="store_true", help="Emit SQL (offline mode) instead"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run migrations and log any errors to Logfire."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting database migrations", revision=args.revision, offline=args.sql
        )

        alembic_cfg = Config("alembic.ini")
        alembic_cfg.set_main_option("sqlalchemy.url", settings.database.url)

        command.upgrade(alembic_cfg, args.revision, sql=args.sql)

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
