"""Error types and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .config import NEGATIVES_MESSAGE


@dataclass
class AddResult:
    """Result of summing a delimited input string."""

    ok: bool
    result: int | None = None
    error: str | None = None
    code: str | None = None
    negatives: list[int] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error is not None:
            result_dict["error"] = self.error
        if self.code is not None:
            result_dict["code"] = self.code
        if self.negatives is not None:
            result_dict["negatives"] = self.negatives
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            parts = ["ok=False", f"error={self.error!r}", f"code={self.code!r}"]
            if self.negatives is not None:
                parts.append(f"negatives={self.negatives!r}")
            return f"AddResult({', '.join(parts)})"
        return f"AddResult(ok=True, result={self.result!r})"


class CalculatorError(ValueError):
    """Base class for every failure raised while evaluating an input."""

    def __init__(self, message: str, code: str = "CALCULATOR_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class StructuralError(CalculatorError):
    """Raised when a delimiter header is malformed."""

    def __init__(self, message: str, code: str = "MALFORMED_HEADER"):
        super().__init__(message, code)


class FormatError(CalculatorError):
    """Raised when a token is not a base-10 integer."""

    def __init__(self, token: str, code: str = "INVALID_NUMBER"):
        self.token = token
        super().__init__(f"invalid number: {token!r}", code)


class ValidationError(CalculatorError):
    """Raised when the input contains negative numbers."""

    def __init__(self, negatives: list[int], code: str = "NEGATIVES_NOT_ALLOWED"):
        self.negatives = list(negatives)
        message = NEGATIVES_MESSAGE.format(", ".join(str(n) for n in self.negatives))
        super().__init__(message, code)
