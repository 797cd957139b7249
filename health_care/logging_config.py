import logging
import os
from logging.handlers import RotatingFileHandler

from health_care.config import Settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_FILE_NAME = "health_care.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3

def setup_logging(settings: Settings):
    """Sends every record to the console and to a size-rotated file under LOG_DIR."""
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    level = logging.getLevelName(settings.LOG_LEVEL.upper())

    handlers = [
        logging.StreamHandler(),
        RotatingFileHandler(
            os.path.join(settings.LOG_DIR, LOG_FILE_NAME),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
        ),
    ]
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)
    # Repeated app startups (tests, reloads) must not stack handlers
    root.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(__name__).info(
        f"Logging to console and {settings.LOG_DIR}/{LOG_FILE_NAME} at level {settings.LOG_LEVEL.upper()}."
    )
