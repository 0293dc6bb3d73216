import argparse
import sys

from config import settings
from infra.database.connection import Database
from infra.database.schema import initialize_schema
from utils.logger import get_logger

logger = get_logger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create the tracks table in the SQLite database")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Drop and recreate the table. Deletes every stored track."
    )
    parser.add_argument(
        "--db-path",
        default=None,
        help=f"SQLite file to initialize (default: {settings.DB_PATH})"
    )
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    target = settings.model_copy(update={"DB_PATH": args.db_path}) if args.db_path else settings

    logger.info(f"Initializing schema at {target.DB_PATH} (force={args.force})")
    try:
        database = Database.from_settings(target)
        initialize_schema(database, force=args.force)
    except Exception as e:
        logger.error(f"Schema setup failed: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
