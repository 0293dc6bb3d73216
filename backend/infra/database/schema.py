from infra.database.connection import Database
from utils.logger import get_logger

# registers the tracks table on SQLModel.metadata
import models  # noqa: F401

logger = get_logger(__name__)

def initialize_schema(database: Database, force: bool = False) -> None:
    """
    Materialize the tracks table, then close the handle.

    force=False only creates what is missing and keeps existing rows.
    force=True drops and recreates the table: every stored track is lost.
    """
    try:
        database.authenticate()
        logger.info("Connected to database")

        if force:
            logger.warning("Dropping existing tables (force reset requested)")
            database.drop_schema()
        database.create_schema()
        logger.info("Database and tables created")
    except Exception as e:
        logger.error(f"Error setting up database: {e}")
        raise
    finally:
        database.close()
        logger.info("Database connection closed")
