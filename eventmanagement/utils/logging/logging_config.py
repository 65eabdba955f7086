import logging
from logging.handlers import RotatingFileHandler
import os

from .request_id_filter import RequestIdFilter

LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(request_id)s - %(message)s"

DEFAULT_LOGGING_DIR = "logs"
MAX_LOG_SIZE_BYTES = 100 * 1024 * 1024  # 100MB
ROOT_LOGGER = "eventmanagement"


def setup_application_logging(is_verbose: bool, request_id_filter: RequestIdFilter, logging_dir: str):
    logger = logging.getLogger(ROOT_LOGGER)

    if is_verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    # File handler for application logs
    file_handler = RotatingFileHandler(
        os.path.join(logging_dir, "application.log"), maxBytes=MAX_LOG_SIZE_BYTES, backupCount=5
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler.addFilter(request_id_filter)
    logger.addHandler(file_handler)

    # Console handler for immediate feedback
    if is_verbose:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        ch.addFilter(request_id_filter)
        logger.addHandler(ch)


def setup_logging(is_verbose: bool, request_id_filter: RequestIdFilter, logging_dir: str = DEFAULT_LOGGING_DIR):
    """Configure application logging under `logging_dir`."""
    if not os.path.exists(logging_dir):
        os.makedirs(logging_dir)

    setup_application_logging(is_verbose, request_id_filter, logging_dir)
