"""Custom exceptions for decay vesting."""

from __future__ import annotations

from typing import Any


class VestingError(Exception):
    """Base exception for vesting operations."""

    pass


class ValidationError(VestingError):
    """Raised when validation fails."""

    pass


class InvalidDecayParameterError(ValidationError):
    """Raised when a decay rate or half-life is not finite and positive."""

    def __init__(self, parameter: str, value: Any):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{parameter} must be finite and positive, got {value!r}")


class InvalidAmountError(ValidationError):
    """Raised when an amount is not a non-negative integer."""

    def __init__(self, amount: Any, message: str = ""):
        self.amount = amount
        super().__init__(
            message or f"Amount must be a non-negative integer, got {amount!r}"
        )


class StateError(VestingError):
    """Raised when an account state cannot be restored."""

    def __init__(self, message: str, details: dict | None = None):
        self.details = details or {}
        super().__init__(message)
