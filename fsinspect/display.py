#!/usr/bin/env python3
"""
Rendering of inspection failures for terminal output.
"""

from __future__ import annotations

import io

from rich.console import Console
from rich.table import Table

from .errors import InspectionError

NOT_AVAILABLE = "N/A"


def create_failure_table(error: InspectionError, value_min_width: int = 40) -> Table:
    """Create a table listing the message and the expected/actual payload"""
    table = Table(title="Inspection failure", show_header=True, expand=True)
    table.add_column("Property", style="cyan", width=10, no_wrap=True)
    table.add_column("Value", style="green", min_width=value_min_width, overflow="fold")

    table.add_row("Message", error.message)
    if error.has_payload:
        table.add_row("Expected", _display_value(error.expected))
        table.add_row("Actual", _display_value(error.actual))
    return table


def render_failure(error: InspectionError, console: Console | None = None) -> None:
    """Print a failure table to ``console`` (stderr by default)"""
    console = console or Console(stderr=True)
    console.print(create_failure_table(error))


def format_failure(error: InspectionError, width: int = 100) -> str:
    """Return the failure table as plain text"""
    buffer = io.StringIO()
    console = Console(file=buffer, width=width, color_system=None, force_terminal=False)
    render_failure(error, console)
    return buffer.getvalue()


def _display_value(value: object) -> str:
    if value is None:
        return NOT_AVAILABLE
    return str(value)
