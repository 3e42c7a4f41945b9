#!/usr/bin/env python3
"""
fsinspect Configuration Schemas - Typed Dataclasses
Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import codecs
from dataclasses import asdict, dataclass, field
from typing import Any

from ..core.constants import (
    DECODE_ERROR_POLICIES,
    DEFAULT_DECODE_ERRORS,
    DEFAULT_ENCODING,
    DIAGNOSTIC_MAX_LENGTH,
    TRUNCATION_MARKER,
)


@dataclass(frozen=True)
class ContentConfig:
    """File content decoding configuration"""

    encoding: str = DEFAULT_ENCODING
    errors: str = DEFAULT_DECODE_ERRORS

    def __post_init__(self):
        """Validate configuration values"""
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {self.encoding}") from e
        if self.errors not in DECODE_ERROR_POLICIES:
            raise ValueError(f"errors must be one of {', '.join(DECODE_ERROR_POLICIES)}")


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Failure diagnostics configuration"""

    max_length: int = DIAGNOSTIC_MAX_LENGTH
    marker: str = TRUNCATION_MARKER

    def __post_init__(self):
        """Validate configuration values"""
        if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
            raise ValueError("max_length must be an integer")
        if self.max_length < 1:
            raise ValueError("max_length must be at least 1")
        if not isinstance(self.marker, str):
            raise ValueError("marker must be a string")


@dataclass(frozen=True)
class FsInspectConfig:
    """Main fsinspect configuration container"""

    content: ContentConfig = field(default_factory=ContentConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "FsInspectConfig":
        """Create configuration from dictionary"""
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")

        kwargs: dict[str, Any] = {}

        if "content" in config_dict:
            kwargs["content"] = ContentConfig(**config_dict["content"])

        if "diagnostics" in config_dict:
            kwargs["diagnostics"] = DiagnosticsConfig(**config_dict["diagnostics"])

        return cls(**kwargs)
