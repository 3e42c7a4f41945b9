#!/usr/bin/env python3
"""Adapters isolating fsinspect from the filesystem."""

from .file_system import FileSystemAdapter, default_file_system

__all__ = ["FileSystemAdapter", "default_file_system"]
