"""String calculator engine.

``StringCalculator`` sums the numbers found in a delimited string, rejects
negatives, ignores values above the upper bound, counts its calls and
notifies registered listeners after every successful evaluation.
"""

from __future__ import annotations

import threading
from typing import Callable, Iterable

from . import config
from .parser import parse_token, split_header, tokenize
from .types import ValidationError

AddListener = Callable[[str, int], None]


def partition(values: Iterable[int], upper_bound: int) -> tuple[list[int], list[int]]:
    """Split parsed numbers into (included, negatives).

    Values above ``upper_bound`` are in neither list. Negativity is checked
    first, so ``-2000`` lands in negatives.
    """
    included = []
    negatives = []
    for value in values:
        if value < 0:
            negatives.append(value)
        elif value <= upper_bound:
            included.append(value)
    return included, negatives


class StringCalculator:
    """Sums delimited numbers; one instance owns one counter and listener list."""

    def __init__(self, upper_bound: int | None = None):
        self.upper_bound = config.UPPER_BOUND if upper_bound is None else upper_bound
        self._called_count = 0
        self._listeners: list[AddListener] = []
        self._lock = threading.RLock()

    def add_listener(self, listener: AddListener) -> AddListener:
        """Register a listener called with ``(input, result)`` after each success.

        Returns the listener, so this also works as a decorator.
        """
        with self._lock:
            self._listeners.append(listener)
        return listener

    def remove_listener(self, listener: AddListener) -> None:
        """Unregister a listener. Unknown listeners are ignored."""
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

    def get_called_count(self) -> int:
        return self._called_count

    def evaluate(self, numbers: str) -> int:
        """Sum the numbers in ``numbers``.

        Args:
            numbers: Input such as ``"1,2"``, ``"1\\n2,3"`` or ``"//;\\n1;2"``

        Returns:
            Sum of the values in ``[0, upper_bound]``

        Raises:
            StructuralError: If the delimiter header has no terminating newline
                or declares an empty delimiter
            FormatError: If a token is not an integer
            ValidationError: If any negative numbers are present
        """
        with self._lock:
            self._called_count += 1

            if numbers == "":
                self._notify(numbers, 0)
                return 0

            delimiters, payload = split_header(numbers)
            values = [parse_token(token) for token in tokenize(payload, delimiters)]
            included, negatives = partition(values, self.upper_bound)
            if negatives:
                raise ValidationError(negatives)

            total = sum(included)
            self._notify(numbers, total)
            return total

    # The kata calls the operation Add
    add = evaluate

    def _notify(self, numbers: str, result: int) -> None:
        for listener in list(self._listeners):
            listener(numbers, result)
