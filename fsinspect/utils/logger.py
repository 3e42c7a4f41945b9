#!/usr/bin/env python3
"""
Logging utilities for fsinspect
"""

import logging
import sys

import colorlog

LOG_FORMAT = "%(log_color)s%(asctime)s - %(name)s - %(levelname)s%(reset)s - %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def setup_logger(name: str = "fsinspect", level: int = logging.INFO) -> logging.Logger:
    """Setup logger with a colored console handler"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = colorlog.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(colorlog.ColoredFormatter(LOG_FORMAT, log_colors=LOG_COLORS))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "fsinspect") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
