"""Logging configuration for contract-pusher."""

import logging
import sys

PACKAGE_LOGGER = "contract_pusher"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
SIMPLE_FORMAT = "%(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug: bool = False) -> logging.Logger:
    """
    Configure console logging for the package.

    Args:
        debug: Log at DEBUG level with file/line information

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    log_format = DETAILED_FORMAT if debug else SIMPLE_FORMAT
    formatter = logging.Formatter(log_format, datefmt=DATE_FORMAT)

    # Prevent duplicate handlers
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
