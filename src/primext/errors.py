"""Error kinds raised by strict operations.

Only two failures exist:

  InvalidArgumentError  caller passed a structurally invalid parameter
  InvalidFormatError    input text does not parse as the target type

Predicates and defaulted conversions never raise either of them.
"""

from __future__ import annotations

from typing import Any


class PrimextError(ValueError):
    """Base class for every error raised by primext."""


class InvalidArgumentError(PrimextError):
    """Raised when a parameter is structurally invalid (bad bounds, non-enum type)."""

    def __init__(self, message: str, param: str | None = None) -> None:
        self.param = param
        super().__init__(message)


class InvalidFormatError(PrimextError):
    """Raised when a string cannot be converted to ``target``."""

    def __init__(self, target: str, value: Any = None, detail: str | None = None) -> None:
        self.target = target
        self.value = value
        message = f"The specified string is not a valid {target} value: {value!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
