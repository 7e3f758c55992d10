import logging
import os
import sys
from pythonjsonlogger import jsonlogger


def get_logger(name: str, log_level: str = "INFO"):
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.propagate = False

    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(message)s'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)

    return logger


def log_event(event: str, **fields):
    """Default pipeline event sink: one JSON record per event, fields as keys."""
    logger.info(event, extra={"event": event, **fields}, stacklevel=2)


logger = get_logger("flashcards", os.getenv("LOG_LEVEL", "INFO").upper())
