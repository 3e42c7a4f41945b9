#!/usr/bin/env python3
"""
fsinspect Core Constants - Content reading and diagnostic limits

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# Content Reading Constants
# =============================================================================
DEFAULT_ENCODING = "utf-8"
DEFAULT_DECODE_ERRORS = "replace"  # Undecodable bytes become U+FFFD
DECODE_ERROR_POLICIES = ("strict", "replace", "ignore", "backslashreplace", "surrogateescape")

# =============================================================================
# Diagnostic Constants
# =============================================================================
# Strings attached to a failure are cut to this many characters
DIAGNOSTIC_MAX_LENGTH = 255
TRUNCATION_MARKER = "..."

# =============================================================================
# Configuration
# =============================================================================
CONFIG_ENV_VAR = "FSINSPECT_CONFIG"
