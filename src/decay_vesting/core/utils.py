"""Core utility functions for decay vesting.

Amounts and timestamps are plain Python ints, which never overflow on their
own. The helpers here clamp them to fixed-width ranges instead, so cumulative
totals behave like unsigned 128-bit amounts and 64-bit timestamps.
"""

AMOUNT_MAX = 2**128 - 1
TIME_MAX = 2**64 - 1


def saturating_add(a: int, b: int, maximum: int = AMOUNT_MAX) -> int:
    """Return ``a + b`` clamped to ``maximum``."""
    return min(a + b, maximum)


def saturating_sub(a: int, b: int) -> int:
    """Return ``a - b`` clamped at zero."""
    return a - b if a > b else 0
