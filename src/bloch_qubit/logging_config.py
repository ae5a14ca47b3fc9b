"""Logging configuration for bloch_qubit."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .config import LOG_FILE, LOG_FORMAT, LOG_LEVEL


def setup_logging(
    name: str = "bloch_qubit",
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (falls back to LOG_FILE, no file logging if both are unset)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Handlers are attached once; later calls only change the level
    if getattr(logger, "_bloch_configured", False):
        for handler in logger.handlers:
            handler.setLevel(numeric_level)
        return logger

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_file is None:
        log_file = LOG_FILE
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger._bloch_configured = True
    return logger
