#!/usr/bin/env python3
"""
Error type raised by failed fsinspect assertions.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from typing import Any

_UNSET = object()


class InspectionError(AssertionError):
    """
    A failed inspection.

    Carries a human readable message and, optionally, the actual and expected
    values so a test runner can show them side by side.

    Attributes:
        message: Description of the failure
        actual: Observed value, None when not applicable
        expected: Expected value, None when not applicable
    """

    def __init__(self, message: str, actual: Any = _UNSET, expected: Any = _UNSET):
        super().__init__(message)
        object.__setattr__(self, "_message", message)
        object.__setattr__(self, "_actual", actual)
        object.__setattr__(self, "_expected", expected)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("message", "actual", "expected"):
            raise AttributeError(f"InspectionError.{name} is read-only")
        super().__setattr__(name, value)

    @property
    def message(self) -> str:
        return self._message

    @property
    def actual(self) -> Any:
        return None if self._actual is _UNSET else self._actual

    @property
    def expected(self) -> Any:
        return None if self._expected is _UNSET else self._expected

    @property
    def has_payload(self) -> bool:
        """True when an actual or expected value was attached."""
        return self._actual is not _UNSET or self._expected is not _UNSET

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization"""
        result: dict[str, Any] = {"message": self.message}
        if self.has_payload:
            result["actual"] = self.actual
            result["expected"] = self.expected
        return result

    def __reduce__(self):
        payload = {}
        if self._actual is not _UNSET:
            payload["actual"] = self._actual
        if self._expected is not _UNSET:
            payload["expected"] = self._expected
        return _restore, (type(self), self._message, payload)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.has_payload:
            return (
                f"{type(self).__name__}({self.message!r}, "
                f"actual={self.actual!r}, expected={self.expected!r})"
            )
        return f"{type(self).__name__}({self.message!r})"


def _restore(cls: type, message: str, payload: dict[str, Any]) -> InspectionError:
    return cls(message, **payload)


__all__ = ["InspectionError"]
