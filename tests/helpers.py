"""Expected-value helpers shared by the vesting tests."""

from __future__ import annotations

import math

from decay_vesting.vesting.account import DecayVestingAccount

RATE = 0.01  # 1% per second


def principal_after(principal: int, seconds: int, rate: float = RATE) -> int:
    """Expected amount still vesting after ``seconds`` with no intervening operations."""
    return math.floor(principal * math.exp(-rate * seconds))


def vested_after(principal: int, seconds: int, rate: float = RATE) -> int:
    """Expected amount vested after ``seconds`` with no intervening operations."""
    return principal - principal_after(principal, seconds, rate)


def assert_conserved(account: DecayVestingAccount) -> None:
    assert account.total_deposited == (
        account.total_claimed() + account.still_vesting() + account.claimable()
    )
