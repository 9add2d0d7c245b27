"""Pydantic model of an account's stored fields."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from decay_vesting.core.exceptions import StateError
from decay_vesting.core.utils import AMOUNT_MAX, TIME_MAX


class AccountState(BaseModel):
    """The five numbers that fully describe a ``DecayVestingAccount``.

    Everything else an account reports is derived from these fields and the
    clock reading at query time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    decay_rate: float = Field(gt=0, description="Decay rate per second")
    total_deposited: int = Field(default=0, ge=0)
    total_claimed: int = Field(default=0, ge=0)
    principal_snapshot: int = Field(default=0, ge=0)
    snapshot_time: int = Field(default=0, ge=0)

    @field_validator("decay_rate")
    @classmethod
    def _finite_rate(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("decay_rate must be finite")
        return v

    @field_validator("total_deposited", "total_claimed", "principal_snapshot")
    @classmethod
    def _amount_in_range(cls, v: int) -> int:
        if v > AMOUNT_MAX:
            raise ValueError(f"amount cannot exceed {AMOUNT_MAX}")
        return v

    @field_validator("snapshot_time")
    @classmethod
    def _time_in_range(cls, v: int) -> int:
        if v > TIME_MAX:
            raise ValueError(f"timestamp cannot exceed {TIME_MAX}")
        return v

    @model_validator(mode="after")
    def _check_totals(self) -> "AccountState":
        if self.total_claimed > self.total_deposited:
            raise ValueError("total_claimed cannot exceed total_deposited")
        return self

    @classmethod
    def from_json(cls, data: str | bytes) -> "AccountState":
        """Parse a JSON document produced by ``model_dump_json``."""
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            raise StateError(
                "Invalid account state",
                details={"errors": exc.errors(include_url=False)},
            ) from exc
