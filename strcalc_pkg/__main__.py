"""Main entry point for running strcalc_pkg as a module.

This allows running strcalc with:
    python -m strcalc_pkg
    python -m strcalc_pkg --demo
    python -m strcalc_pkg -e "//;\\n1;2"

This is equivalent to running:
    python -m strcalc_pkg.cli
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
