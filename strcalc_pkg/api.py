"""Public API for strcalc - returns structured objects instead of raising."""

from __future__ import annotations

from .calculator import StringCalculator
from .logging_config import get_logger
from .parser import parse_numbers
from .types import AddResult, CalculatorError, ValidationError

logger = get_logger("api")


def evaluate(numbers: str, calculator: StringCalculator | None = None) -> AddResult:
    """Sum a delimited input string.

    Args:
        numbers: Input string (e.g., "1,2", "//;\\n1;2")
        calculator: Calculator to run on; a fresh one is used when omitted,
            so counters and listeners are only shared when you pass one in

    Returns:
        AddResult with the sum, or with error message and code

    Example:
        >>> from strcalc_pkg.api import evaluate
        >>> evaluate("1,2,3").result
        6
        >>> evaluate("1,-2").error
        'negatives not allowed: -2'
    """
    calc = calculator if calculator is not None else StringCalculator()
    try:
        total = calc.evaluate(numbers)
    except ValidationError as e:
        logger.debug("Rejected %r: %s", numbers, e.message)
        return AddResult(ok=False, error=e.message, code=e.code, negatives=e.negatives)
    except CalculatorError as e:
        logger.debug("Rejected %r: %s (%s)", numbers, e.message, e.code)
        return AddResult(ok=False, error=e.message, code=e.code)
    return AddResult(ok=True, result=total)


def validate_input(numbers: str) -> tuple[bool, str | None]:
    """Validate an input string without evaluating it on any calculator.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from strcalc_pkg.api import validate_input
        >>> validate_input("//;\\n1;2")
        (True, None)
        >>> validate_input("1,a")
        (False, "invalid number: 'a'")
    """
    try:
        negatives = [n for n in parse_numbers(numbers) if n < 0]
        if negatives:
            raise ValidationError(negatives)
    except CalculatorError as e:
        return False, e.message
    return True, None
