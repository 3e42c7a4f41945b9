#!/usr/bin/env python3
"""
fsinspect Utilities
"""

from .logger import get_logger, setup_logger
from .output import truncate

__all__ = [
    "get_logger",
    "setup_logger",
    "truncate",
]
