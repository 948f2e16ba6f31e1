from __future__ import annotations

import argparse
import json
from typing import Any

from . import config
from .api import evaluate
from .calculator import StringCalculator
from .config import VERSION
from .logging_config import get_logger, setup_logging
from .types import AddResult

logger = get_logger("cli")

DEMO_INPUTS = [
    "",
    "1",
    "1,2",
    "1,2,3,4,5",
    "1\n2,3",
    "//;\n1;2",
    "//[***]\n1***2***3",
    "//[*][%]\n1*2%3",
    "//[**][%%]\n1**2%%3",
    "2,1001",
    "1000,1001,2",
    "1,-2,3",
    "-1,2,-3,-4",
    "1,a,2",
    "//;1;2",
]


def _unescape(text: str) -> str:
    """Read a typed two-character ``\\n`` as a newline."""
    return text.replace("\\n", "\n")


def _log_add_occurred(numbers: str, result: int) -> None:
    logger.debug("add occurred: %r -> %d", numbers, result)


def print_result_pretty(
    res: AddResult, output_format: str = "human", numbers: str | None = None
) -> None:
    """Print result in specified format.

    Args:
        res: Result of an evaluation
        output_format: "json" for JSON output, "human" for human-readable
        numbers: Original input; when given it is echoed alongside the result
    """
    if output_format == "json":
        data: dict[str, Any] = res.to_dict()
        if numbers is not None:
            data = {"input": numbers, **data}
        print(json.dumps(data, ensure_ascii=False))
        return
    prefix = f"{numbers!r} -> " if numbers is not None else ""
    if not res.ok:
        print(f"{prefix}Error: {res.error}")
        return
    print(f"{prefix}{res.result}")


def run_demo(calculator: StringCalculator, output_format: str = "human") -> int:
    """Feed the sample inputs through one calculator and print every outcome."""
    for numbers in DEMO_INPUTS:
        print_result_pretty(evaluate(numbers, calculator), output_format, numbers=numbers)
    if output_format == "human":
        print(f"calls: {calculator.get_called_count()}")
    return 0


def _health_check() -> int:
    """Run health check to verify basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running strcalc health check...")
    print("-" * 50)

    # Fixed bound: the expectations below assume the default of 1000
    calc = StringCalculator(upper_bound=1000)
    expectations = [
        ("", 0),
        ("1,2", 3),
        ("1\n2,3", 6),
        ("//[**][%%]\n1**2%%3", 6),
        ("2,1001", 2),
    ]
    for numbers, expected in expectations:
        res = evaluate(numbers, calc)
        if res.ok and res.result == expected:
            print(f"[OK] {numbers!r} = {expected}")
            checks_passed += 1
        else:
            print(f"[FAIL] {numbers!r}: expected {expected}, got {res!r}")
            checks_failed += 1

    res = evaluate("-1,2,-3", calc)
    if not res.ok and res.error == "negatives not allowed: -1, -3":
        print("[OK] Negatives are rejected")
        checks_passed += 1
    else:
        print(f"[FAIL] Negative check: got {res!r}")
        checks_failed += 1

    expected_calls = len(expectations) + 1
    if calc.get_called_count() == expected_calls:
        print("[OK] Call counter works")
        checks_passed += 1
    else:
        print(
            f"[FAIL] Call counter: expected {expected_calls}, got {calc.get_called_count()}"
        )
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_help_text() -> None:
    print("Enter numbers separated by ',' or newlines, e.g. 1,2,3")
    print("Type \\n for a newline: //;\\n1;2 uses ';' as the delimiter")
    print("Several delimiters: //[*][%]\\n1*2%3")
    print("Commands: count (calls so far), help, quit")


def repl_loop(calculator: StringCalculator, output_format: str = "human") -> None:
    """Interactive loop; every line is one evaluation on the same calculator."""
    print("strcalc - type 'help' for usage, 'quit' to exit.")
    while True:
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        command = raw.strip().lower()
        if command in ("quit", "exit"):
            break
        if command == "help":
            print_help_text()
            continue
        if command == "count":
            print(calculator.get_called_count())
            continue
        print_result_pretty(evaluate(_unescape(raw), calculator), output_format)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the strcalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="strcalc", description="Sum the numbers in a delimited string."
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one input and exit (\\n is read as a newline)",
        dest="eval_input",
    )
    parser.add_argument(
        "--demo", action="store_true", help="Run the built-in sample inputs"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--upper-bound",
        type=int,
        help=f"Ignore numbers above this value (default: {config.UPPER_BOUND})",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.LOG_LEVEL,
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify basic operations",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.upper_bound is not None and args.upper_bound < 0:
        parser.error("--upper-bound must not be negative")

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    calculator = StringCalculator(upper_bound=args.upper_bound)
    calculator.add_listener(_log_add_occurred)

    if args.demo:
        return run_demo(calculator, output_format=args.format)
    if args.eval_input is not None:
        res = evaluate(_unescape(args.eval_input), calculator)
        print_result_pretty(res, output_format=args.format)
        return 0 if res.ok else 1

    repl_loop(calculator, output_format=args.format)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m strcalc_pkg.cli"""
    import sys

    sys.exit(main_entry())
