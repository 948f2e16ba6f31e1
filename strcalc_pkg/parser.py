"""Input parsing module.

This module handles:
- Delimiter header detection and stripping (``//;\\n`` and ``//[**][%]\\n``)
- Splitting the payload on literal delimiters in a single pass
- Decoding tokens as base-10 integers
"""

from __future__ import annotations

import re
from functools import lru_cache

from .config import (
    BRACKET_CLOSE,
    BRACKET_OPEN,
    CACHE_SIZE_PARSE,
    DEFAULT_DELIMITERS,
    HEADER_MARKER,
    HEADER_TERMINATOR,
    INTEGER_TOKEN_RE,
)
from .types import FormatError, StructuralError


def parse_header_body(body: str) -> tuple[str, ...]:
    """Turn a header body into a tuple of literal delimiters.

    Args:
        body: Text between ``//`` and the first newline, e.g. ``";"`` or
            ``"[***][%%]"``

    Returns:
        Delimiters in declaration order, duplicates removed

    Raises:
        StructuralError: If the body or any bracket group is empty
    """
    if body.startswith(BRACKET_OPEN) and body.endswith(BRACKET_CLOSE):
        delimiters = []
        current: list[str] = []
        collecting = False
        for ch in body:
            if ch == BRACKET_OPEN:
                collecting = True
                current = []
            elif ch == BRACKET_CLOSE:
                collecting = False
                delimiters.append("".join(current))
            elif collecting:
                current.append(ch)
    else:
        delimiters = [body]

    if any(d == "" for d in delimiters):
        raise StructuralError(
            f"empty delimiter in header: {body!r}", code="EMPTY_DELIMITER"
        )
    return tuple(dict.fromkeys(delimiters))


def split_header(numbers: str) -> tuple[tuple[str, ...], str]:
    """Resolve the delimiter set and strip an optional header.

    Returns:
        Tuple of (delimiters, payload)

    Raises:
        StructuralError: If the header marker is not followed by a newline
    """
    if not numbers.startswith(HEADER_MARKER):
        return DEFAULT_DELIMITERS, numbers

    newline_idx = numbers.find(HEADER_TERMINATOR)
    if newline_idx == -1:
        raise StructuralError(
            "delimiter header must end with a newline", code="MISSING_NEWLINE"
        )
    body = numbers[len(HEADER_MARKER):newline_idx]
    payload = numbers[newline_idx + len(HEADER_TERMINATOR):]
    return parse_header_body(body), payload


@lru_cache(maxsize=CACHE_SIZE_PARSE)
def _compile_splitter(delimiters: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so a delimiter that prefixes another never wins the match
    ordered = sorted(delimiters, key=len, reverse=True)
    return re.compile("|".join(re.escape(d) for d in ordered))


def tokenize(payload: str, delimiters: tuple[str, ...]) -> list[str]:
    """Split the payload on any of the delimiters and drop empty tokens."""
    splitter = _compile_splitter(tuple(delimiters))
    return [token for token in splitter.split(payload) if token]


def parse_token(token: str) -> int:
    """Decode a single token as a signed base-10 integer.

    Raises:
        FormatError: If the token is not an integer
    """
    if not INTEGER_TOKEN_RE.fullmatch(token):
        raise FormatError(token)
    try:
        return int(token)
    except ValueError:
        # Digit strings past sys.get_int_max_str_digits()
        raise FormatError(token) from None


def parse_numbers(numbers: str) -> list[int]:
    """Parse a full input string into its numbers, in encounter order.

    Example:
        >>> parse_numbers("//[*][%]\\n1*2%3")
        [1, 2, 3]
    """
    if not numbers:
        return []
    delimiters, payload = split_header(numbers)
    return [parse_token(token) for token in tokenize(payload, delimiters)]
