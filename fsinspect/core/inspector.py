#!/usr/bin/env python3
"""
fsinspect Inspector - Fluent filesystem assertions

This module provides the FileInspector class, an inspection context bound to
one subject path. Each assertion resolves the subject, queries the filesystem
and either returns the same inspector for chaining or raises InspectionError.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import os
from typing import Any

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..config_schemas.schemas import FsInspectConfig
from ..errors import InspectionError
from ..utils.logger import get_logger
from ..utils.output import truncate
from .file_kind import FileKind, classify
from .paths import module_dir, resolve_path

logger = get_logger(__name__)


class FileInspector:
    """
    Chainable filesystem assertions for a single subject path.

    Attributes:
        inspect_value: The subject path exactly as given
        base_dir: Directory relative subjects are resolved against
        config: Content decoding and diagnostics settings
    """

    def __init__(
        self,
        inspect_value: str | os.PathLike,
        base_dir: str | os.PathLike,
        *,
        config: FsInspectConfig | None = None,
        file_system: FileSystemAdapter | None = None,
    ):
        """
        Initialize FileInspector with a subject and its base directory.

        Args:
            inspect_value: Path to inspect, absolute or relative to base_dir
            base_dir: Directory of the code that owns the subject
            config: Settings, defaults when omitted
            file_system: Adapter used for every filesystem access
        """
        self.inspect_value = inspect_value
        self.base_dir = base_dir
        self.config = config or FsInspectConfig()
        self._fs = file_system or default_file_system

    @classmethod
    def from_module(
        cls, module_file: str | os.PathLike, inspect_value: str | os.PathLike, **kwargs: Any
    ) -> "FileInspector":
        """Build an inspector resolving relative to the module at ``module_file``."""
        return cls(inspect_value, module_dir(module_file), **kwargs)

    @property
    def resolved_path(self) -> str:
        return resolve_path(self.base_dir, self.inspect_value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._subject!r}, base_dir={os.fspath(self.base_dir)!r})"

    # ------------------------------------------------------------------
    # Existence
    # ------------------------------------------------------------------

    def exists(self, message: str | None = None) -> "FileInspector":
        """
        Inspect whether the subject exists.

        Example:
            >>> inspect_path("data/report.json", base_dir).exists()
        """
        path = self.resolved_path
        logger.debug(f"exists: {path}")
        if not self._fs.is_accessible(path):
            raise InspectionError(
                message or f"File {self._subject} does not exist! (Resolved path: {path})"
            )
        return self

    def not_exists(self, message: str | None = None) -> "FileInspector":
        """Inspect whether the subject does not exist."""
        path = self.resolved_path
        logger.debug(f"not_exists: {path}")
        if self._fs.is_accessible(path):
            raise InspectionError(message or f"File {self._subject} exists, but it should not!")
        return self

    # ------------------------------------------------------------------
    # Entry type
    # ------------------------------------------------------------------

    def is_file(self, message: str | None = None) -> "FileInspector":
        """Inspect whether the subject exists and is a regular file."""
        path, kind = self._classify("is_file")
        if kind is FileKind.ABSENT:
            raise InspectionError(
                message or f"File {self._subject} does not exist! (Resolved path: {path})"
            )
        if kind is not FileKind.FILE:
            raise InspectionError(
                message or f"File {self._subject} is not a file!", kind.value, FileKind.FILE.value
            )
        return self

    def is_not_file(self, message: str | None = None) -> "FileInspector":
        """Inspect whether the subject is absent or anything but a regular file."""
        _, kind = self._classify("is_not_file")
        if kind is FileKind.FILE:
            raise InspectionError(
                message or f"File {self._subject} is a file, but it should not be!",
                kind.value,
                FileKind.FILE.value,
            )
        return self

    def is_directory(self, message: str | None = None) -> "FileInspector":
        """Inspect whether the subject exists and is a directory."""
        path, kind = self._classify("is_directory")
        if kind is FileKind.ABSENT:
            raise InspectionError(
                message or f"Dir {self._subject} does not exist! (Resolved path: {path})"
            )
        if kind is not FileKind.DIRECTORY:
            raise InspectionError(
                message or f"Dir {self._subject} is not a directory!",
                kind.value,
                FileKind.DIRECTORY.value,
            )
        return self

    def is_not_directory(self, message: str | None = None) -> "FileInspector":
        """Inspect whether the subject is absent or anything but a directory."""
        _, kind = self._classify("is_not_directory")
        if kind is FileKind.DIRECTORY:
            raise InspectionError(
                message or f"Dir {self._subject} is a directory, but it should not be!",
                kind.value,
                FileKind.DIRECTORY.value,
            )
        return self

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def contains(
        self, needle: str, encoding: str | None = None, message: str | None = None
    ) -> "FileInspector":
        """
        Inspect whether the subject's text content includes ``needle``.

        Args:
            needle: Substring to look for
            encoding: Overrides the configured content encoding
            message: Overrides the default failure message

        Raises:
            InspectionError: If the subject is absent, is a directory, cannot
                be read or does not include ``needle``
        """
        path, kind = self._classify("contains")
        if kind is FileKind.ABSENT:
            raise InspectionError(
                message or f"File {self._subject} does not exist! (Resolved path: {path})"
            )
        if kind is FileKind.DIRECTORY:
            raise InspectionError(message or f"File {self._subject} is a directory!")

        content = self._read(path, encoding)
        if needle not in content:
            raise InspectionError(
                message or f"File {self._subject} does not contain a certain string!",
                self._clip(content),
                self._clip(needle),
            )
        return self

    def not_contains(
        self, needle: str, encoding: str | None = None, message: str | None = None
    ) -> "FileInspector":
        """
        Inspect whether the subject's text content excludes ``needle``.

        An absent subject passes without being read.
        """
        path, kind = self._classify("not_contains")
        if kind is FileKind.ABSENT:
            return self
        if kind is FileKind.DIRECTORY:
            raise InspectionError(message or f"File {self._subject} is a directory!")

        content = self._read(path, encoding)
        if needle in content:
            raise InspectionError(
                message or f"File {self._subject} contains a certain string, but it should not!",
                self._clip(content),
                self._clip(needle),
            )
        return self

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def _subject(self) -> str:
        return os.fspath(self.inspect_value)

    def _classify(self, operation: str) -> tuple[str, FileKind]:
        path = self.resolved_path
        kind = classify(path, self._fs)
        logger.debug(f"{operation}: {path} is {kind.value}")
        return path, kind

    def _read(self, path: str, encoding: str | None) -> str:
        content_config = self.config.content
        try:
            return self._fs.read_text(
                path,
                encoding=encoding or content_config.encoding,
                errors=content_config.errors,
            )
        except (OSError, UnicodeDecodeError) as e:
            raise InspectionError(
                f"File {self._subject} could not be read! (Resolved path: {path}): {e}"
            ) from e

    def _clip(self, text: str) -> str:
        diagnostics = self.config.diagnostics
        return truncate(text, diagnostics.max_length, diagnostics.marker)


def inspect_path(
    inspect_value: str | os.PathLike, base_dir: str | os.PathLike, **kwargs: Any
) -> FileInspector:
    """Create a FileInspector for ``inspect_value`` resolved against ``base_dir``."""
    return FileInspector(inspect_value, base_dir, **kwargs)


__all__ = ["FileInspector", "inspect_path"]
