from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from fsinspect.core.file_kind import FileKind, classify, kind_from_mode


def test_classify_regular_file_and_directory(sample_tree: Path) -> None:
    assert classify(str(sample_tree / "a.txt")) is FileKind.FILE
    assert classify(str(sample_tree / "empty.txt")) is FileKind.FILE
    assert classify(str(sample_tree / "sub")) is FileKind.DIRECTORY


def test_classify_missing_path_is_absent(tmp_path: Path) -> None:
    assert classify(str(tmp_path / "missing.txt")) is FileKind.ABSENT
    assert classify(str(tmp_path / "missing" / "deeper")) is FileKind.ABSENT


def test_classify_file_used_as_directory_is_absent(sample_tree: Path) -> None:
    assert classify(str(sample_tree / "a.txt" / "child")) is FileKind.ABSENT


def test_classify_invalid_path_is_absent() -> None:
    assert classify("bad\x00path") is FileKind.ABSENT


def test_classify_does_not_follow_symlinks(symlink_tree: Path) -> None:
    assert classify(str(symlink_tree / "link_to_file")) is FileKind.SYMBOLIC_LINK
    assert classify(str(symlink_tree / "link_to_dir")) is FileKind.SYMBOLIC_LINK
    assert classify(str(symlink_tree / "dangling")) is FileKind.SYMBOLIC_LINK


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires named pipes")
def test_classify_fifo(tmp_path: Path) -> None:
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)
    assert classify(str(fifo)) is FileKind.FIFO


@pytest.mark.skipif(not os.path.exists("/dev/null"), reason="requires /dev/null")
def test_classify_character_device() -> None:
    assert classify("/dev/null") is FileKind.CHARACTER_DEVICE


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (stat.S_IFREG | 0o644, FileKind.FILE),
        (stat.S_IFDIR | 0o755, FileKind.DIRECTORY),
        (stat.S_IFBLK, FileKind.BLOCK_DEVICE),
        (stat.S_IFCHR, FileKind.CHARACTER_DEVICE),
        (stat.S_IFLNK | 0o777, FileKind.SYMBOLIC_LINK),
        (stat.S_IFIFO, FileKind.FIFO),
        (stat.S_IFSOCK, FileKind.SOCKET),
        (0, FileKind.ABSENT),
    ],
)
def test_kind_from_mode(mode: int, expected: FileKind) -> None:
    assert kind_from_mode(mode) is expected


def test_classify_uses_adapter_and_recomputes(sample_tree: Path, recording_fs) -> None:
    path = str(sample_tree / "a.txt")
    assert classify(path, recording_fs) is FileKind.FILE
    os.remove(path)
    assert classify(path, recording_fs) is FileKind.ABSENT
    assert recording_fs.calls == [("lstat", path), ("lstat", path)]


def test_file_kind_values_compare_as_strings() -> None:
    assert FileKind.DIRECTORY == "directory"
    assert str(FileKind.BLOCK_DEVICE) == "blockdevice"
    assert [kind.value for kind in FileKind] == [
        "file",
        "directory",
        "blockdevice",
        "characterdevice",
        "symboliclink",
        "fifo",
        "socket",
        "absent",
    ]
