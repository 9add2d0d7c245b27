"""Decay Vesting - continuous exponential-decay vesting accounting.

Deposits vest continuously along an exponential curve. An account can be
queried at any moment for what is still vesting, what has vested, and what
is claimable, and it settles lazily against an injectable clock.

Example:
    >>> from decay_vesting import DecayVestingAccount, LogicalClock, TimeUnit
    >>>
    >>> clock = LogicalClock()
    >>> account = DecayVestingAccount.from_half_life(7, TimeUnit.DAYS, clock=clock)
    >>> account.deposit(1_000_000)
    >>> clock.advance(7 * 86400)
    >>> 499_000 < account.still_vesting() <= 500_000
    True
    >>> claimed = account.claim()
    >>> account.claimable()
    0
"""

from decay_vesting.core.exceptions import (
    InvalidAmountError,
    InvalidDecayParameterError,
    StateError,
    ValidationError,
    VestingError,
)
from decay_vesting.core.utils import AMOUNT_MAX, TIME_MAX
from decay_vesting.temporal.clock import Clock, LogicalClock, SystemClock
from decay_vesting.temporal.decay import (
    DecayConfig,
    TimeUnit,
    decay_rate_from_half_life,
    half_life_from_decay_rate,
)
from decay_vesting.vesting.account import AccountBalances, DecayVestingAccount
from decay_vesting.vesting.state import AccountState

__version__ = "0.1.0"

__all__ = [
    # Accounts
    "DecayVestingAccount",
    "AccountBalances",
    "AccountState",
    # Temporal
    "Clock",
    "LogicalClock",
    "SystemClock",
    "DecayConfig",
    "TimeUnit",
    "decay_rate_from_half_life",
    "half_life_from_decay_rate",
    # Limits
    "AMOUNT_MAX",
    "TIME_MAX",
    # Errors
    "VestingError",
    "ValidationError",
    "InvalidDecayParameterError",
    "InvalidAmountError",
    "StateError",
]
