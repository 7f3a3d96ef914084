"""Logging configuration for the command line scripts."""

import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str = None) -> None:
    """Configure the logger of the `heattransport` package.

    :param level: The logging level, e.g. `logging.DEBUG`.
    :param log_file: An optional path to additionally write the log to.
    """
    logger = logging.getLogger("heattransport")
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
