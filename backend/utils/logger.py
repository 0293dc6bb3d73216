import logging
import os
from logging.handlers import RotatingFileHandler
import sys

from config import settings

LOG_FILE_NAME = "track_library.log"

def get_logger(name: str):
    """
    Return a logger that writes to both the console and a rotating log file.
    """
    logger = logging.getLogger(name)

    # avoid stacking handlers when called repeatedly for the same name
    if not logger.handlers:
        level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
        logger.setLevel(level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # 1. file handler (rotates every 10MB, keeps 5 generations)
        try:
            os.makedirs(settings.LOG_DIR, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(settings.LOG_DIR, LOG_FILE_NAME),
                maxBytes=10*1024*1024,
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(level)
            logger.addHandler(file_handler)
        except OSError as e:
            # read-only home, missing permissions etc.
            print(f"Failed to set up file logging: {e}", file=sys.stderr)

        # 2. console handler
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    return logger
