#!/usr/bin/env python3
"""
Example: chaining filesystem assertions from a script.

Subjects are resolved relative to this file's directory.
"""

import sys

from fsinspect import FileInspector, InspectionError
from fsinspect.display import render_failure
from fsinspect.utils.logger import setup_logger


def main() -> int:
    setup_logger()

    try:
        FileInspector.from_module(__file__, "basic_usage.py").exists().is_file().contains("fsinspect")
        FileInspector.from_module(__file__, ".").is_directory().is_not_file()
        FileInspector.from_module(__file__, "missing.txt").not_exists().not_contains("anything")
    except InspectionError as e:
        render_failure(e)
        return 1

    print("All inspections passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
