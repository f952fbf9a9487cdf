"""
Logging Configuration
Routes the 'axion' loggers to the console and, optionally, a session log file.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "axion"
CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the game session.

    Calling it again replaces the handlers of the previous call, so a
    restarted session never logs twice.

    Args:
        level: Logging level for the console (e.g. logging.DEBUG)
        log_file: Optional path; the file is truncated and receives every
            record down to DEBUG, including per-completion summaries.

    Returns:
        The configured 'axion' logger
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    logger_level = level
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)
        logger_level = logging.DEBUG

    logger.setLevel(logger_level)
    logger.debug(f"Logging to console at {logging.getLevelName(level)}"
                 + (f" and to {log_file}" if log_file else ""))
    return logger
