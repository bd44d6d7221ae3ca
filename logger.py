import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logger() -> logging.Logger:
    """Configure and return the main table logger."""
    log_level = os.getenv('LOG_LEVEL', 'INFO').upper()

    logger = logging.getLogger('sortable_table')
    logger.setLevel(getattr(logging, log_level, logging.INFO))
    logger.handlers = []
    logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    # File logging is opt-in; hosting apps choose where logs go
    log_dir = os.getenv('TABLE_LOG_DIR')
    if not log_dir:
        return logger

    try:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path / 'sortable_table.log',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s | %(levelname)s | %(message)s',
                            datefmt='%Y-%m-%d %H:%M:%S')
        )
        logger.addHandler(file_handler)

    except OSError as e:
        # If we can't create file handlers (permissions, etc), just use console
        logger.warning(f"Could not create file handler in {log_dir}: {e}")

    return logger


logger = setup_logger()
