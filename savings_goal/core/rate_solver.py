"""Bisection search for the periodic rate that meets a savings target."""

from __future__ import annotations

import logging
from typing import Tuple

from savings_goal.core.cashflow import cash_flow_gap
from savings_goal.schemas.plan import PlanInputs, RateSolution

logger = logging.getLogger(__name__)

# Periodic rate may range from -99% to +500%.
RATE_BRACKET: Tuple[float, float] = (-0.99, 5.0)
MAX_ITERATIONS = 100
TOLERANCE = 1e-10


def solve_rate_detailed(inputs: PlanInputs) -> RateSolution:
    """
    Bisect ``cash_flow_gap`` over ``RATE_BRACKET``.

    When both ends of the bracket have the same sign there is no root to
    chase: the result is rate 0.0 with ``solved=False``.
    """
    lo, hi = RATE_BRACKET
    f_lo = cash_flow_gap(lo, inputs)
    f_hi = cash_flow_gap(hi, inputs)

    if f_lo * f_hi > 0:
        logger.debug(
            "No sign change in [%s, %s] (f_lo=%s, f_hi=%s); falling back to 0",
            lo,
            hi,
            f_lo,
            f_hi,
        )
        return RateSolution(rate=0.0, solved=False, iterations=0, residual=f_lo)

    for iteration in range(1, MAX_ITERATIONS + 1):
        mid = (lo + hi) / 2
        f_mid = cash_flow_gap(mid, inputs)
        if abs(f_mid) < TOLERANCE:
            return RateSolution(rate=mid, solved=True, iterations=iteration, residual=f_mid)
        # the sign of f(lo) never changes while lo moves, so f_lo stays valid
        if f_lo * f_mid <= 0:
            hi = mid
        else:
            lo = mid

    mid = (lo + hi) / 2
    return RateSolution(
        rate=mid,
        solved=True,
        iterations=MAX_ITERATIONS,
        residual=cash_flow_gap(mid, inputs),
    )


def solve_rate(inputs: PlanInputs) -> float:
    """Return the periodic rate for ``inputs``, or 0.0 when none is bracketed."""
    return solve_rate_detailed(inputs).rate
