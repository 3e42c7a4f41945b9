#!/usr/bin/env python3
"""Fluent configuration builder."""

from typing import Any

from .schemas import ContentConfig, DiagnosticsConfig, FsInspectConfig


class ConfigBuilder:
    """Fluent API builder for FsInspectConfig."""

    def __init__(self) -> None:
        self._content_kwargs: dict[str, Any] = {}
        self._diagnostics_kwargs: dict[str, Any] = {}

    # Content Configuration Methods
    def with_encoding(self, encoding: str) -> "ConfigBuilder":
        self._content_kwargs["encoding"] = encoding
        return self

    def with_decode_errors(self, errors: str) -> "ConfigBuilder":
        self._content_kwargs["errors"] = errors
        return self

    # Diagnostics Configuration Methods
    def with_max_length(self, max_length: int) -> "ConfigBuilder":
        self._diagnostics_kwargs["max_length"] = max_length
        return self

    def with_marker(self, marker: str) -> "ConfigBuilder":
        self._diagnostics_kwargs["marker"] = marker
        return self

    def build(self) -> FsInspectConfig:
        """Build the configuration, validating every section"""
        return FsInspectConfig(
            content=ContentConfig(**self._content_kwargs),
            diagnostics=DiagnosticsConfig(**self._diagnostics_kwargs),
        )


def create_default_config() -> FsInspectConfig:
    """Create the default configuration"""
    return ConfigBuilder().build()
