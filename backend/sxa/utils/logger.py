"""
Centralized logging configuration for the application
"""

import logging
import sys
from typing import Optional
from datetime import datetime

from sxa.config.base import settings


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for different log levels"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        # Color a copy so file handlers sharing the record stay plain
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


CONSOLE_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            defaults to settings.LOG_LEVEL

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Don't add handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper()))

    # Console handler with colors
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ColoredFormatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    # File handler (without colors)
    if settings.LOG_FILE:
        try:
            file_handler = logging.FileHandler(settings.LOG_FILE)
            file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)
        except OSError as e:
            # If file logging fails, just use console
            logger.warning(f"Could not create file handler: {e}")

    return logger


class LoggerMixin:
    """Mixin class to add logging capabilities to any class"""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for the current class"""
        return get_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")


# Performance monitoring
class PerformanceLogger:
    """Logger for performance monitoring and metrics"""

    def __init__(self, name: str):
        self.logger = get_logger(f"perf.{name}")
        self.start_time = None
        self.operation = None

    def start(self, operation: str):
        """Start timing an operation"""
        self.operation = operation
        self.start_time = datetime.now()
        self.logger.debug(f"Starting {operation}")

    def end(self, additional_info: Optional[str] = None) -> Optional[float]:
        """End timing and log the result"""
        if self.start_time is None:
            self.logger.warning("end() called without start()")
            return None

        duration = (datetime.now() - self.start_time).total_seconds()
        info_str = f" - {additional_info}" if additional_info else ""
        self.logger.info(f"Completed {self.operation} in {duration:.3f}s{info_str}")
        self.start_time = None
        return duration
