"""
Logging configuration using loguru.
"""

import logging
import sys

from loguru import logger

LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class InterceptHandler(logging.Handler):
    """Intercept standard logging and redirect to loguru."""

    def emit(self, record):
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_level: str = "info", log_file: str = "") -> None:
    """
    Setup loguru logging configuration.

    Args:
        log_level: Logging level (trace, debug, info, success, warning, error, critical)
        log_file: Optional path of a rotating log file
    """
    # Remove default handler
    logger.remove()

    level = log_level.upper()
    if level not in LEVELS:
        level = "INFO"

    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
            rotation="10 MB",
            retention="1 month",
            compression="gz",
        )

    # uvicorn logs through the standard library
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    if level not in ["DEBUG", "TRACE"]:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
