"""Continuous exponential-decay vesting account.

Deposited principal vests continuously along ``P(t) = P0 * exp(-rate * t)``.
The account stores only a principal snapshot and the clock reading it was
taken at; every query derives the current figures lazily from those two
values and the elapsed time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from decay_vesting.core.exceptions import InvalidAmountError, StateError
from decay_vesting.core.utils import AMOUNT_MAX, saturating_add, saturating_sub
from decay_vesting.temporal.clock import Clock, SystemClock
from decay_vesting.temporal.decay import (
    DecayConfig,
    TimeUnit,
    decay_rate_from_half_life,
    decayed_amount,
    half_life_from_decay_rate,
    validate_decay_rate,
)
from decay_vesting.vesting.state import AccountState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountBalances:
    """All derived figures of an account at a single clock reading."""

    as_of: int
    still_vesting: int
    total_vested: int
    claimable: int
    total_claimed: int
    total_deposited: int
    unclaimed_total: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "as_of": self.as_of,
            "still_vesting": self.still_vesting,
            "total_vested": self.total_vested,
            "claimable": self.claimable,
            "total_claimed": self.total_claimed,
            "total_deposited": self.total_deposited,
            "unclaimed_total": self.unclaimed_total,
        }


class DecayVestingAccount:
    """A single balance that vests by exponential decay.

    Not safe for concurrent use; callers sharing an account across threads
    must serialize access to it.

    Example:
        >>> from decay_vesting import LogicalClock
        >>> clock = LogicalClock()
        >>> account = DecayVestingAccount(0.01, clock=clock)
        >>> account.deposit(100)
        >>> clock.advance(10)
        >>> account.claimable()
        10
        >>> account.claim()
        10
    """

    def __init__(self, decay_rate: float, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._decay_rate = validate_decay_rate(decay_rate)
        self._total_deposited = 0
        self._total_claimed = 0
        self._principal_snapshot = 0
        self._snapshot_time = self._clock.now()

    @classmethod
    def from_half_life(
        cls,
        half_life: float,
        unit: TimeUnit = TimeUnit.SECONDS,
        clock: Clock | None = None,
    ) -> "DecayVestingAccount":
        """Create an account whose principal halves every ``half_life`` units."""
        return cls(decay_rate_from_half_life(half_life, unit), clock=clock)

    @classmethod
    def from_config(
        cls,
        config: DecayConfig,
        clock: Clock | None = None,
    ) -> "DecayVestingAccount":
        return cls(config.decay_rate, clock=clock)

    @classmethod
    def from_state(
        cls,
        state: AccountState | dict[str, Any],
        clock: Clock | None = None,
    ) -> "DecayVestingAccount":
        """Rebuild an account from stored fields.

        Args:
            state: An ``AccountState`` or a mapping with the same fields
            clock: Time source for the restored account

        Returns:
            Account whose stored fields equal ``state``
        """
        if not isinstance(state, AccountState):
            try:
                state = AccountState.model_validate(state)
            except PydanticValidationError as exc:
                raise StateError(
                    "Invalid account state",
                    details={"errors": exc.errors(include_url=False)},
                ) from exc

        account = cls(state.decay_rate, clock=clock)
        account._total_deposited = state.total_deposited
        account._total_claimed = state.total_claimed
        account._principal_snapshot = state.principal_snapshot
        account._snapshot_time = state.snapshot_time
        return account

    def to_state(self) -> AccountState:
        """Return the stored fields as they are, without settling."""
        return AccountState(
            decay_rate=self._decay_rate,
            total_deposited=self._total_deposited,
            total_claimed=self._total_claimed,
            principal_snapshot=self._principal_snapshot,
            snapshot_time=self._snapshot_time,
        )

    # ========== Parameters ==========

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def decay_rate(self) -> float:
        """Decay rate per second."""
        return self._decay_rate

    @property
    def half_life(self) -> float:
        """Half-life in seconds."""
        return half_life_from_decay_rate(self._decay_rate)

    @property
    def principal_snapshot(self) -> int:
        return self._principal_snapshot

    @property
    def snapshot_time(self) -> int:
        return self._snapshot_time

    @property
    def total_deposited(self) -> int:
        return self._total_deposited

    # ========== Derived quantities ==========

    def _still_vesting_at(self, now: int) -> int:
        if self._principal_snapshot == 0:
            return 0
        elapsed = saturating_sub(now, self._snapshot_time)
        return decayed_amount(self._principal_snapshot, self._decay_rate, elapsed)

    def still_vesting(self) -> int:
        """Amount that has yet to vest, rounded down. Continuously decays."""
        return self._still_vesting_at(self._clock.now())

    def total_vested(self) -> int:
        """Total vested since inception, whether claimed or not."""
        return saturating_sub(self._total_deposited, self.still_vesting())

    def total_claimed(self) -> int:
        """Total amount claimed since inception."""
        return self._total_claimed

    def claimable(self) -> int:
        """Amount that could be claimed right now."""
        return saturating_sub(self.total_vested(), self._total_claimed)

    def unclaimed_total(self) -> int:
        """Deposited amount not yet claimed, vested or not."""
        return saturating_sub(self._total_deposited, self._total_claimed)

    def balances(self) -> AccountBalances:
        """Read every derived figure against one clock reading."""
        now = self._clock.now()
        still_vesting = self._still_vesting_at(now)
        total_vested = saturating_sub(self._total_deposited, still_vesting)
        return AccountBalances(
            as_of=now,
            still_vesting=still_vesting,
            total_vested=total_vested,
            claimable=saturating_sub(total_vested, self._total_claimed),
            total_claimed=self._total_claimed,
            total_deposited=self._total_deposited,
            unclaimed_total=self.unclaimed_total(),
        )

    # ========== Mutations ==========

    def settle(self) -> int:
        """Snapshot the amount still vesting and restart the clock on it.

        Returns:
            The amount still vesting at the current time
        """
        now = self._clock.now()
        principal = self._still_vesting_at(now)
        if principal != self._principal_snapshot:
            logger.debug(
                "Settled principal %d -> %d over %ds",
                self._principal_snapshot,
                principal,
                saturating_sub(now, self._snapshot_time),
            )
        self._principal_snapshot = principal
        self._snapshot_time = now
        return principal

    def deposit(self, amount: int) -> None:
        """Deposit ``amount`` and start it vesting from now.

        The new amount joins whatever is still vesting and the combined
        principal decays together from this instant. Amounts already vested
        stay claimable.
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidAmountError(amount)

        principal = self.settle()
        self._principal_snapshot = saturating_add(principal, amount)
        if self._total_deposited + amount > AMOUNT_MAX:
            logger.warning("Total deposited saturated at %d", AMOUNT_MAX)
        self._total_deposited = saturating_add(self._total_deposited, amount)
        logger.debug(
            "Deposited %d at t=%d, principal now %d",
            amount,
            self._snapshot_time,
            self._principal_snapshot,
        )

    def claim(self) -> int:
        """Claim everything currently claimable.

        Returns:
            The claimed amount
        """
        principal = self.settle()
        amount = saturating_sub(
            saturating_sub(self._total_deposited, self._total_claimed),
            principal,
        )
        self._total_claimed = saturating_add(self._total_claimed, amount)
        logger.debug("Claimed %d at t=%d", amount, self._snapshot_time)
        return amount

    def set_decay_rate(self, decay_rate: float) -> None:
        """Change the decay rate. Settles first, so past decay is unaffected."""
        decay_rate = validate_decay_rate(decay_rate)
        self.settle()
        logger.debug("Decay rate %g -> %g at t=%d", self._decay_rate, decay_rate, self._snapshot_time)
        self._decay_rate = decay_rate

    def set_half_life(self, half_life: float, unit: TimeUnit = TimeUnit.SECONDS) -> None:
        """Change the half-life. Settles first, so past decay is unaffected."""
        self.set_decay_rate(decay_rate_from_half_life(half_life, unit))

    def __repr__(self) -> str:
        return (
            f"DecayVestingAccount(decay_rate={self._decay_rate!r}, "
            f"total_deposited={self._total_deposited}, "
            f"total_claimed={self._total_claimed}, "
            f"principal_snapshot={self._principal_snapshot}, "
            f"snapshot_time={self._snapshot_time})"
        )
