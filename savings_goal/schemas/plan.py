"""Data contracts for the rate solver and schedule generator."""

from __future__ import annotations

import math
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

# Upper bound on schedule length so a single request stays bounded.
MAX_PERIODS = 10_000


def _finite_or_zero(value: Any) -> float:
    """Coerce missing, non-numeric and non-finite values to 0.0."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


# Overflowing balances and NaN residuals are dumped as 0.0 so responses stay valid JSON.
FiniteFloat = Annotated[float, PlainSerializer(_finite_or_zero, return_type=float)]


class PlanInputs(BaseModel):
    """Inputs required to solve a savings plan."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    present_value: float = Field(0.0, description="Balance before any contribution or growth.")
    periodic_contribution: float = Field(0.0, description="Fixed amount added every period.")
    periods: int = Field(1, ge=1, le=MAX_PERIODS, description="Number of contribution periods.")
    target_future_value: float = Field(0.0, description="Desired balance after the last period.")
    participants: int = Field(0, ge=0, description="People sharing the contributions evenly.")

    @field_validator(
        "present_value",
        "periodic_contribution",
        "target_future_value",
        mode="before",
    )
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        return _finite_or_zero(value)

    @field_validator("periods", mode="before")
    @classmethod
    def _coerce_periods(cls, value: Any) -> int:
        return max(1, int(_finite_or_zero(value)))

    @field_validator("participants", mode="before")
    @classmethod
    def _coerce_participants(cls, value: Any) -> int:
        return max(0, int(_finite_or_zero(value)))


class RateSolution(BaseModel):
    """Outcome of the bisection search.

    ``solved`` is False when the bracket showed no sign change; ``rate`` is
    then 0.0, the same value a plan needing no growth would get.

    ``solved`` is True whenever a sign change was bracketed, including when
    the iteration budget ran out before ``|residual|`` dropped under the
    tolerance. In that case ``iterations`` equals the budget and ``residual``
    carries the leftover gap, typically float noise on the target's scale.
    """

    model_config = ConfigDict(frozen=True)

    rate: FiniteFloat
    solved: bool
    iterations: int = Field(..., ge=0)
    residual: FiniteFloat


class ScheduleRow(BaseModel):
    """Single period of a savings schedule."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=1)
    contribution: FiniteFloat
    interest_earned: FiniteFloat
    contribution_per_participant: FiniteFloat
    interest_per_participant: FiniteFloat
    ending_balance: FiniteFloat


class ScheduleRequest(PlanInputs):
    rate: Optional[float] = Field(
        default=None,
        description="Periodic rate to expand; solved from the inputs when omitted.",
    )

    @field_validator("rate", mode="before")
    @classmethod
    def _coerce_rate(cls, value: Any) -> Optional[float]:
        if value is None:
            return None
        return _finite_or_zero(value)


class ScheduleResponse(BaseModel):
    rate: FiniteFloat
    schedule: List[ScheduleRow]


class PlanRequest(PlanInputs):
    paid: Dict[int, bool] = Field(default_factory=dict)


class PlanSummary(BaseModel):
    rate: FiniteFloat
    solved: bool
    final_balance: FiniteFloat
    progress_percent: FiniteFloat = Field(..., le=100)
    contribution_per_participant: FiniteFloat
    total_contributed: FiniteFloat
    total_interest: FiniteFloat


class LedgerRow(ScheduleRow):
    paid: bool = False


class PlanResponse(BaseModel):
    summary: PlanSummary
    schedule: List[LedgerRow]
    paid_total: FiniteFloat
    pending_total: FiniteFloat
