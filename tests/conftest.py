"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fsinspect.adapters.file_system import FileSystemAdapter

pytest_plugins = ["pytester"]

SAMPLE_TEXT = "hello world"


class RecordingFileSystem(FileSystemAdapter):
    """File system adapter recording every call, optionally failing reads."""

    def __init__(self, read_error: Exception | None = None) -> None:
        self.calls: list[tuple[str, str]] = []
        self.read_error = read_error

    def lstat(self, path):
        self.calls.append(("lstat", str(path)))
        return super().lstat(path)

    def is_accessible(self, path):
        self.calls.append(("is_accessible", str(path)))
        return super().is_accessible(path)

    def read_text(self, path, encoding="utf-8", errors="replace"):
        self.calls.append(("read_text", str(path)))
        if self.read_error is not None:
            raise self.read_error
        return super().read_text(path, encoding=encoding, errors=errors)

    @property
    def reads(self) -> list[str]:
        return [path for name, path in self.calls if name == "read_text"]


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small tree: a.txt, empty.txt, sub/ and sub/nested.txt."""
    (tmp_path / "a.txt").write_text(SAMPLE_TEXT, encoding="utf-8")
    (tmp_path / "empty.txt").write_text("", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "nested.txt").write_text("nested content", encoding="utf-8")
    return tmp_path


@pytest.fixture
def symlink_tree(sample_tree: Path) -> Path:
    """Extend sample_tree with links to a file, a directory and nowhere."""
    try:
        os.symlink(sample_tree / "a.txt", sample_tree / "link_to_file")
        os.symlink(sample_tree / "sub", sample_tree / "link_to_dir")
        os.symlink(sample_tree / "nowhere", sample_tree / "dangling")
    except (OSError, NotImplementedError) as exc:
        pytest.skip(f"symlinks not supported: {exc}")
    return sample_tree


@pytest.fixture
def make_recording_fs():
    """Factory for recording adapters, optionally failing every read."""
    return RecordingFileSystem


@pytest.fixture
def recording_fs() -> RecordingFileSystem:
    return RecordingFileSystem()
