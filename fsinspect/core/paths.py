#!/usr/bin/env python3
"""
Path resolution relative to an explicit base directory.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import os


def resolve_path(base_dir: str | os.PathLike, subject: str | os.PathLike) -> str:
    """
    Resolve a subject path against a base directory.

    An absolute subject ignores the base. The result is absolute with ``.`` and
    ``..`` segments collapsed; no filesystem access takes place.

    Args:
        base_dir: Directory relative subjects are resolved against
        subject: Path to resolve

    Returns:
        Absolute, normalized path string
    """
    return os.path.abspath(os.path.join(os.fspath(base_dir), os.fspath(subject)))


def module_dir(module_file: str | os.PathLike) -> str:
    """Return the absolute directory holding ``module_file`` (pass ``__file__``)."""
    return os.path.dirname(os.path.abspath(os.fspath(module_file)))


__all__ = ["resolve_path", "module_dir"]
