"""Centralized configuration for strcalc.

This module defines:
- The header marker and default delimiters
- The upper bound above which numbers are ignored
- Cache sizes for compiled split patterns
- Regex patterns for token validation

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with STRCALC_)
"""

import importlib.metadata
import os
import re

try:
    VERSION = importlib.metadata.version("strcalc")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "1.0.0"

# Input format
HEADER_MARKER = "//"
HEADER_TERMINATOR = "\n"
DEFAULT_DELIMITERS = (",", "\n")
BRACKET_OPEN = "["
BRACKET_CLOSE = "]"

# Numbers strictly greater than this are dropped from the sum
UPPER_BOUND = int(os.getenv("STRCALC_UPPER_BOUND", "1000"))

# Cache configuration
CACHE_SIZE_PARSE = int(os.getenv("STRCALC_CACHE_SIZE_PARSE", "256"))

# Default level for the CLI logger
LOG_LEVEL = os.getenv("STRCALC_LOG_LEVEL", "WARNING").upper()

NEGATIVES_MESSAGE = "negatives not allowed: {}"

INTEGER_TOKEN_RE = re.compile(r"\s*[+-]?[0-9]+\s*")
