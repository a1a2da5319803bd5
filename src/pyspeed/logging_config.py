# src/pyspeed/logging_config.py
import logging
import logging.handlers
from typing import Optional

'''
Example for usage of logger.*
from pyspeed.logging_config import setup_logging

logger = setup_logging(verbose=True)
logger.info('Running benchmark suite.')
logger.debug('Profile collected 42 rows.')
'''

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    logger = logging.getLogger('pyspeed')

    if logger.handlers:
        console_level = logging.INFO if verbose else logging.WARNING
        for handler in logger.handlers:
            # File handlers always keep DEBUG
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(console_level)
        if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
            logger.setLevel(console_level)
        return logger

    logger.setLevel(logging.DEBUG if log_file else logging.INFO if verbose else logging.WARNING)

    formatter = logging.Formatter(FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(log_file,
                                                            maxBytes=5_000_000,
                                                            backupCount=0)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
