"""Basic usage example for Decay Vesting."""

from decay_vesting import (
    AccountState,
    DecayVestingAccount,
    LogicalClock,
    TimeUnit,
)

DAY = 86400


def show(label: str, account: DecayVestingAccount) -> None:
    b = account.balances()
    print(
        f"{label:<28} day {b.as_of // DAY:>3}  "
        f"vesting={b.still_vesting:>9}  claimable={b.claimable:>9}  "
        f"claimed={b.total_claimed:>9}"
    )


def main():
    # One clock drives the whole simulation
    clock = LogicalClock()

    # =================================================================
    # DEPOSITS AND DECAY
    # =================================================================

    # Half of whatever is still vesting vests every 7 days
    account = DecayVestingAccount.from_half_life(7, TimeUnit.DAYS, clock=clock)

    account.deposit(1_000_000)
    show("Deposited 1,000,000", account)

    clock.advance(7 * DAY)
    show("After one half-life", account)

    # =================================================================
    # REBASING AND CLAIMING
    # =================================================================

    # A second deposit merges with the unvested remainder; claimable is kept
    account.deposit(500_000)
    show("Deposited 500,000 more", account)

    clock.advance(3 * DAY)
    claimed = account.claim()
    print(f"\nClaimed {claimed}")
    show("After claim", account)

    # =================================================================
    # CHANGING THE HALF-LIFE
    # =================================================================

    # Past decay is settled under the old rate before the change
    account.set_half_life(1, TimeUnit.DAYS)
    clock.advance(2 * DAY)
    show("Two days at 1-day half-life", account)

    # =================================================================
    # SERIALIZING STATE
    # =================================================================

    payload = account.to_state().model_dump_json()
    print(f"\nSerialized state: {payload}")

    restored = DecayVestingAccount.from_state(AccountState.from_json(payload), clock=clock)
    show("Restored account", restored)


if __name__ == "__main__":
    main()
