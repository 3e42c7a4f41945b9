#!/usr/bin/env python3
"""Filesystem adapter for controlled IO access."""

from __future__ import annotations

import os
from pathlib import Path

from ..core.constants import DEFAULT_DECODE_ERRORS, DEFAULT_ENCODING


class FileSystemAdapter:
    """Provide a minimal, read-only filesystem access abstraction."""

    def lstat(self, path: str | Path) -> os.stat_result:
        return os.lstat(path)

    def is_accessible(self, path: str | Path) -> bool:
        try:
            return os.access(path, os.F_OK)
        except ValueError:
            # Embedded NUL byte
            return False

    def read_text(
        self,
        path: str | Path,
        encoding: str = DEFAULT_ENCODING,
        errors: str = DEFAULT_DECODE_ERRORS,
    ) -> str:
        file_path = Path(path)
        return file_path.read_text(encoding=encoding, errors=errors)


default_file_system = FileSystemAdapter()
