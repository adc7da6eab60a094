"""JSON log output for the canvas demo application."""

import logging
from pythonjsonlogger.json import JsonFormatter


def setup_logger(level: str = 'INFO') -> None:
    """Send records from all loggers to stderr as JSON."""
    logHandler = logging.StreamHandler()
    formatter = JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s',
                              rename_fields={'levelname': 'level', 'asctime': 'timestamp'})
    logHandler.setFormatter(formatter)
    logger = logging.getLogger()
    if not any(isinstance(handler.formatter, JsonFormatter)
               for handler in logger.handlers):
        logger.addHandler(logHandler)
    logger.setLevel(level)
