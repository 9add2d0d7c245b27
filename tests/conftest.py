"""Pytest fixtures for decay-vesting tests.

Provides fixtures for:
- A logical clock starting at zero
- An account decaying at 1% per second on that clock
"""

from __future__ import annotations

import pytest

from decay_vesting.temporal.clock import LogicalClock
from decay_vesting.vesting.account import DecayVestingAccount

from tests.helpers import RATE


@pytest.fixture
def logical_clock() -> LogicalClock:
    """Create a logical clock at t=0."""
    return LogicalClock()


@pytest.fixture
def account(logical_clock: LogicalClock) -> DecayVestingAccount:
    """Create an empty account on the logical clock."""
    return DecayVestingAccount(RATE, clock=logical_clock)
