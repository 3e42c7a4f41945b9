#!/usr/bin/env python3
"""
fsinspect configuration schemas and builder.
"""

from .builder import ConfigBuilder, create_default_config
from .schemas import ContentConfig, DiagnosticsConfig, FsInspectConfig

__all__ = [
    # Schema classes
    "FsInspectConfig",
    "ContentConfig",
    "DiagnosticsConfig",
    # Builder classes and helpers
    "ConfigBuilder",
    "create_default_config",
]
