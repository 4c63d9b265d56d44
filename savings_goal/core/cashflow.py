"""Cash-flow mismatch between a rate-implied final balance and the target."""

from __future__ import annotations

import math

from savings_goal.schemas.plan import PlanInputs

ZERO_RATE_EPSILON = 1e-10


def _growth_factor(rate: float, exponent: int) -> float:
    """(1 + rate) ** exponent, saturating to +inf instead of raising."""
    try:
        return (1.0 + rate) ** exponent
    except (OverflowError, ZeroDivisionError):
        return math.inf


def cash_flow_gap(rate: float, inputs: PlanInputs) -> float:
    """
    Projected final balance at ``rate`` minus the target future value.

    The present value compounds for every period. Contributions accumulate as
    an annuity due over ``periods - 1`` periods: the first one is already in
    the account but has not earned a full period of growth yet.

    Near-zero rates use the linear form to avoid dividing by ``rate``.
    """
    periods = int(inputs.periods)
    pv = inputs.present_value
    pmt = inputs.periodic_contribution
    fv = inputs.target_future_value

    if abs(rate) < ZERO_RATE_EPSILON:
        return pv + pmt * periods - fv

    g = _growth_factor(rate, periods - 1)
    first = pmt * g
    rest = pmt * ((g - 1) / rate) * (1 + rate)
    return pv * _growth_factor(rate, periods) + first + rest - fv
