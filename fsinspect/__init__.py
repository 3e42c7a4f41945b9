#!/usr/bin/env python3
"""
fsinspect - Fluent filesystem assertions for test code

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "Fluent filesystem assertions for test code"

from .config_schemas import FsInspectConfig
from .core.file_kind import FileKind, classify
from .core.inspector import FileInspector, inspect_path
from .core.paths import module_dir, resolve_path
from .errors import InspectionError

__all__ = [
    "FileInspector",
    "FileKind",
    "FsInspectConfig",
    "InspectionError",
    "classify",
    "inspect_path",
    "module_dir",
    "resolve_path",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
