import sys
import uvicorn

from config import settings
from infra.database.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)

def main():
    # Start the server only after the database connection works
    try:
        database = Database.from_settings(settings)
        database.authenticate()
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)

    logger.info(f"API connected to database at {settings.DB_PATH}")

    from main import create_app
    app = create_app(database)

    logger.info(f"Server listening on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, reload=False, workers=1)

if __name__ == "__main__":
    main()
