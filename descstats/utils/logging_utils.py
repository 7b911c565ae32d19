"""Logger setup for command line use.

Library modules only call ``logging.getLogger(__name__)``; handlers are attached here.
"""

import logging
import sys
from pathlib import Path

import colorlog


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "descstats",
    log_file: str | Path | None = None,
    level: str = "INFO",
    colorize: bool = True,
) -> logging.Logger:
    """Set up a logger with a console handler and an optional file handler.

    Args:
        name: Logger name; the package root configures every module logger below it.
        log_file: Path to log file (optional)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        colorize: Whether to colorize console output

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger(level="DEBUG")
        >>> logger.info("Summarizing iris")
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers = []

    file_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    if colorize:
        console_formatter: logging.Formatter = colorlog.ColoredFormatter(
            "%(log_color)s" + LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
    else:
        console_formatter = file_formatter

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger
