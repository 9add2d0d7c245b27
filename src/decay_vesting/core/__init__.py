"""Core types and helpers shared across decay vesting."""

from decay_vesting.core.exceptions import (
    InvalidAmountError,
    InvalidDecayParameterError,
    StateError,
    ValidationError,
    VestingError,
)
from decay_vesting.core.utils import (
    AMOUNT_MAX,
    TIME_MAX,
    saturating_add,
    saturating_sub,
)

__all__ = [
    "VestingError",
    "ValidationError",
    "InvalidDecayParameterError",
    "InvalidAmountError",
    "StateError",
    "AMOUNT_MAX",
    "TIME_MAX",
    "saturating_add",
    "saturating_sub",
]
