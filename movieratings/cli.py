"""
Command-line database management.

Commands run in the order given, e.g. ``install stage`` creates the tables
and then fills them with sample data.
"""

import argparse
import sys
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from movieratings.api.config import Settings
from movieratings.database.connection import DatabaseManager
from movieratings.database.init_db import (
    init_database,
    stage_database,
    unstage_database,
    uninstall_database,
    verify_schema,
)
from movieratings.utils.logging_config import configure_cli_logging, get_logger

logger = get_logger(__name__)

COMMANDS = {
    "install": init_database,
    "stage": stage_database,
    "unstage": unstage_database,
    "uninstall": uninstall_database,
}

USAGE = 'Valid commands are "install", "stage", "unstage", and "uninstall"'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Manage the movie ratings database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create tables and load sample data
  python scripts/manage_db.py install stage

  # Empty every table
  python scripts/manage_db.py unstage

  # Drop every table
  python scripts/manage_db.py uninstall
        """
    )
    parser.add_argument(
        'commands',
        nargs='+',
        metavar='command',
        help='One or more of: ' + ', '.join(COMMANDS)
    )
    parser.add_argument(
        '--database-url',
        default=None,
        help='SQLAlchemy database URL (default: $DATABASE_URL or sqlite:///data/movieratings.db)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the requested commands; returns the process exit code."""
    args = build_parser().parse_args(argv)

    unknown = [command for command in args.commands if command not in COMMANDS]
    if unknown:
        print(USAGE, file=sys.stderr)
        return 1

    configure_cli_logging(debug=args.debug)
    settings = Settings.from_env()
    db_manager = DatabaseManager(args.database_url or settings.database_url, echo=settings.sql_echo)

    try:
        for command in args.commands:
            logger.info("Running %s", command)
            COMMANDS[command](db_manager)
            if command == "install" and not verify_schema(db_manager):
                return 1
    except SQLAlchemyError as e:
        logger.error("Command failed: %s", e)
        return 1
    finally:
        db_manager.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
