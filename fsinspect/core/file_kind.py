#!/usr/bin/env python3
"""
File kind classification for filesystem entries.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import os
import stat
from enum import Enum

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..utils.logger import get_logger

logger = get_logger(__name__)


class FileKind(str, Enum):
    """Kinds of filesystem entries"""

    FILE = "file"
    DIRECTORY = "directory"
    BLOCK_DEVICE = "blockdevice"
    CHARACTER_DEVICE = "characterdevice"
    SYMBOLIC_LINK = "symboliclink"
    FIFO = "fifo"
    SOCKET = "socket"
    ABSENT = "absent"  # Missing, unreadable or unclassifiable

    def __str__(self) -> str:
        return self.value


_MODE_CHECKS = (
    (stat.S_ISREG, FileKind.FILE),
    (stat.S_ISDIR, FileKind.DIRECTORY),
    (stat.S_ISBLK, FileKind.BLOCK_DEVICE),
    (stat.S_ISCHR, FileKind.CHARACTER_DEVICE),
    (stat.S_ISLNK, FileKind.SYMBOLIC_LINK),
    (stat.S_ISFIFO, FileKind.FIFO),
    (stat.S_ISSOCK, FileKind.SOCKET),
)


def kind_from_mode(mode: int) -> FileKind:
    """Map an ``st_mode`` value to a FileKind, ABSENT when nothing matches."""
    for check, kind in _MODE_CHECKS:
        if check(mode):
            return kind
    return FileKind.ABSENT


def classify(path: str | os.PathLike, file_system: FileSystemAdapter | None = None) -> FileKind:
    """
    Classify the entry at ``path`` without following symbolic links.

    Never raises: any failure to stat the path yields FileKind.ABSENT.

    Args:
        path: Absolute path to classify
        file_system: Adapter used for the stat call

    Returns:
        The FileKind of the entry
    """
    fs = file_system or default_file_system
    try:
        mode = fs.lstat(path).st_mode
    except (OSError, ValueError) as e:
        logger.debug(f"Cannot stat {path}, treating as absent: {e}")
        return FileKind.ABSENT

    kind = kind_from_mode(mode)
    if kind is FileKind.ABSENT:
        logger.debug(f"Unknown file mode {oct(mode)} for {path}, treating as absent")
    return kind


__all__ = ["FileKind", "classify", "kind_from_mode"]
