"""Error types raised by the calculators."""

from __future__ import annotations

from typing import Any, List, Optional


class CalculatorError(Exception):
    """Base exception for calculator failures."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class InvalidInputError(CalculatorError, ValueError):
    """Structurally invalid input: negative money, years <= 0, non-finite numbers."""

    def __init__(self, errors: List[str], details: Optional[Any] = None):
        super().__init__("; ".join(errors), details)
        self.errors = errors


class UnknownCalculatorError(CalculatorError, KeyError):
    def __init__(self, name: str):
        super().__init__(f"unknown calculator {name!r}")
        self.name = name

    def __str__(self) -> str:
        return self.message
