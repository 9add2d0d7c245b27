"""Vesting accounts."""

from decay_vesting.vesting.account import AccountBalances, DecayVestingAccount
from decay_vesting.vesting.state import AccountState

__all__ = [
    "AccountBalances",
    "AccountState",
    "DecayVestingAccount",
]
