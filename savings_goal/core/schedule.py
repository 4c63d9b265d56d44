"""Period-by-period savings schedule built on a solved rate."""

from __future__ import annotations

from typing import Iterator, List, Sequence

from savings_goal.schemas.plan import PlanInputs, ScheduleRow


def iter_schedule(inputs: PlanInputs, rate: float) -> Iterator[ScheduleRow]:
    """
    Yield one row per period, 1..periods.

    Order of operations (per period):
      1) Add the contribution to the carried-in balance.
      2) Apply interest on that base, except in period 1 which has not been
         held for a full period yet.
      3) Split contribution and interest evenly across participants.
    """
    balance = inputs.present_value
    contribution = inputs.periodic_contribution
    participants = inputs.participants

    for index in range(1, inputs.periods + 1):
        base = balance + contribution
        interest = 0.0 if index == 1 else base * rate
        ending = base + interest

        if participants > 0:
            contribution_share = contribution / participants
            interest_share = interest / participants
        else:
            contribution_share = 0.0
            interest_share = 0.0

        yield ScheduleRow(
            index=index,
            contribution=contribution,
            interest_earned=interest,
            contribution_per_participant=contribution_share,
            interest_per_participant=interest_share,
            ending_balance=ending,
        )
        balance = ending


def build_schedule(inputs: PlanInputs, rate: float) -> List[ScheduleRow]:
    """Materialize the full schedule; always ``inputs.periods`` rows long."""
    return list(iter_schedule(inputs, rate))


def final_balance(inputs: PlanInputs, rows: Sequence[ScheduleRow]) -> float:
    if not rows:
        return inputs.present_value
    return rows[-1].ending_balance


def progress_percent(balance: float, target: float) -> float:
    """Share of the target reached, capped at 100; 0 when there is no target."""
    if target > 0:
        return min(100.0, balance / target * 100)
    return 0.0
