"""Exponential decay math for vesting principal.

Rates are always expressed per second, matching clock ticks. Half-lives may
be given in any ``TimeUnit`` and are converted on the way in.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

from decay_vesting.core.exceptions import InvalidDecayParameterError

# exp(-x) is exactly 0.0 in double precision past this point
_UNDERFLOW_EXPONENT = 746.0


class TimeUnit(Enum):
    """Units a half-life can be expressed in."""

    SECONDS = 1
    MINUTES = 60
    HOURS = 3600
    DAYS = 86400

    @property
    def seconds(self) -> int:
        return self.value


def _require_positive(parameter: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDecayParameterError(parameter, value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidDecayParameterError(parameter, value)
    return float(value)


def validate_decay_rate(rate: float) -> float:
    """Return ``rate`` as a float, or raise if it is not finite and positive."""
    return _require_positive("decay_rate", rate)


def decay_rate_from_half_life(
    half_life: float,
    unit: TimeUnit = TimeUnit.SECONDS,
) -> float:
    """Convert a half-life to a per-second decay rate.

    Args:
        half_life: Time for half of the principal to vest
        unit: Unit ``half_life`` is expressed in

    Returns:
        Decay rate per second, ``ln(2) / (half_life * unit.seconds)``
    """
    half_life = _require_positive("half_life", half_life)
    rate = math.log(2) / (half_life * unit.seconds)
    # A tiny half-life in large units can still overflow to inf
    return validate_decay_rate(rate)


def half_life_from_decay_rate(
    rate: float,
    unit: TimeUnit = TimeUnit.SECONDS,
) -> float:
    """Convert a per-second decay rate to a half-life in ``unit``."""
    rate = validate_decay_rate(rate)
    return math.log(2) / rate / unit.seconds


@dataclass(frozen=True)
class DecayConfig:
    """Configuration for exponential vesting decay."""

    half_life: float = 7.0
    unit: TimeUnit = TimeUnit.DAYS

    def __post_init__(self) -> None:
        if not isinstance(self.unit, TimeUnit):
            raise ValueError(f"unit must be a TimeUnit, got {self.unit!r}")
        _require_positive("half_life", self.half_life)

    @property
    def decay_rate(self) -> float:
        """Decay rate per second."""
        return decay_rate_from_half_life(self.half_life, self.unit)

    @property
    def half_life_seconds(self) -> float:
        return self.half_life * self.unit.seconds


def decay_factor(rate: float, elapsed: int) -> float:
    """Compute the fraction of principal still vesting after ``elapsed`` seconds.

    Args:
        rate: Decay rate per second
        elapsed: Non-negative elapsed seconds

    Returns:
        ``exp(-rate * elapsed)``, between 0.0 and 1.0
    """
    if elapsed < 0:
        raise ValueError("Elapsed time cannot be negative")
    if elapsed == 0:
        return 1.0
    exponent = rate * elapsed
    if exponent >= _UNDERFLOW_EXPONENT:
        return 0.0
    return math.exp(-exponent)


def decayed_amount(principal: int, rate: float, elapsed: int) -> int:
    """Apply decay to an integer principal, rounding toward zero.

    Once ``rate * elapsed`` reaches ``ln(principal + 1)`` the decayed value
    is below one unit, so the result is zero without consulting ``exp``.
    The multiplication itself is exact, so large principals are not rounded
    to a float before flooring.

    Args:
        principal: Amount still vesting at the start of the interval
        rate: Decay rate per second
        elapsed: Non-negative elapsed seconds

    Returns:
        ``floor(principal * exp(-rate * elapsed))``, never above ``principal``
    """
    if principal <= 0:
        return 0
    if elapsed == 0:
        return principal
    if rate * elapsed >= math.log(principal + 1):
        return 0
    factor = decay_factor(rate, elapsed)
    return min(principal, math.floor(principal * Fraction(factor)))
