"""strcalc package: delimited-string calculator engine, parser, API, and CLI."""

from .calculator import StringCalculator
from .types import (
    AddResult,
    CalculatorError,
    FormatError,
    StructuralError,
    ValidationError,
)

__all__ = [
    "config",
    "parser",
    "calculator",
    "types",
    "api",
    "cli",
    "logging_config",
    "StringCalculator",
    "AddResult",
    "CalculatorError",
    "FormatError",
    "StructuralError",
    "ValidationError",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "validate_input",
]
