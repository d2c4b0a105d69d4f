"""
Logging configuration for XRPL.Sale SDK
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

SDK_LOGGER_NAME = "xrplsale"

# Log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output"""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        # Color a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.COLORS['RESET']}"

        return super().format(record)


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    enable_console_logging: bool = True,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Setup logging for the SDK logger

    Only the ``xrplsale`` logger is configured; the application's root logger
    is left alone. Calling this again replaces the handlers it added before.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a rotating log file
        enable_console_logging: Whether to log to stderr
        max_file_size: Maximum size of the log file before rotation
        backup_count: Number of rotated log files to keep
    """
    level = LOG_LEVELS.get(log_level.upper(), logging.INFO)

    logger = logging.getLogger(SDK_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_xrplsale_handler", False):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)

    if enable_console_logging:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        console_handler._xrplsale_handler = True
        logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        file_handler._xrplsale_handler = True
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the SDK namespace"""
    if name == SDK_LOGGER_NAME or name.startswith(SDK_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{SDK_LOGGER_NAME}.{name}")
