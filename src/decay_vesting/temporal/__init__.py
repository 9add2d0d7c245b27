"""Temporal layer: clocks and decay math."""

from decay_vesting.temporal.clock import Clock, LogicalClock, SystemClock
from decay_vesting.temporal.decay import (
    DecayConfig,
    TimeUnit,
    decay_factor,
    decay_rate_from_half_life,
    decayed_amount,
    half_life_from_decay_rate,
)

__all__ = [
    "Clock",
    "LogicalClock",
    "SystemClock",
    "DecayConfig",
    "TimeUnit",
    "decay_factor",
    "decay_rate_from_half_life",
    "decayed_amount",
    "half_life_from_decay_rate",
]
