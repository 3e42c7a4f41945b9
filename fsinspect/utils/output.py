#!/usr/bin/env python3
"""Output helpers for failure diagnostics."""

from __future__ import annotations

from ..core.constants import DIAGNOSTIC_MAX_LENGTH, TRUNCATION_MARKER


def truncate(text: str, limit: int = DIAGNOSTIC_MAX_LENGTH, marker: str = TRUNCATION_MARKER) -> str:
    """Cut text to its first ``limit`` characters, appending ``marker`` when cut."""
    if len(text) > limit:
        return f"{text[:limit]}{marker}"
    return text
