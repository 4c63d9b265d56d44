from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional

from savings_goal.core.rate_solver import solve_rate_detailed
from savings_goal.core.schedule import build_schedule, final_balance, progress_percent
from savings_goal.domain.ledger import PaymentLedger
from savings_goal.schemas.plan import LedgerRow, PlanInputs, PlanSummary, ScheduleRow

logger = logging.getLogger(__name__)


@dataclass
class PlanEvaluation:
    summary: PlanSummary
    rows: List[ScheduleRow]
    ledger: PaymentLedger

    def ledger_rows(self) -> List[LedgerRow]:
        return [
            LedgerRow(**row.model_dump(), paid=self.ledger.is_paid(row.index))
            for row in self.rows
        ]

    @property
    def paid_total(self) -> float:
        return self.ledger.paid_total(self.rows)

    @property
    def pending_total(self) -> float:
        return self.ledger.pending_total(self.rows)


def summarize(inputs: PlanInputs, rows: List[ScheduleRow], rate: float, solved: bool) -> PlanSummary:
    ending = final_balance(inputs, rows)
    participants = inputs.participants
    return PlanSummary(
        rate=rate,
        solved=solved,
        final_balance=ending,
        progress_percent=progress_percent(ending, inputs.target_future_value),
        contribution_per_participant=(
            inputs.periodic_contribution / participants if participants > 0 else 0.0
        ),
        total_contributed=sum(row.contribution for row in rows),
        total_interest=sum(row.interest_earned for row in rows),
    )


def evaluate_plan(
    inputs: PlanInputs,
    paid: Optional[Mapping[int, bool]] = None,
) -> PlanEvaluation:
    """Solve the rate, expand the schedule and overlay the paid flags."""
    ledger = PaymentLedger.from_mapping(paid or {}, inputs.periods)

    solution = solve_rate_detailed(inputs)
    if not solution.solved:
        logger.info(
            "Plan target %s not reachable within the rate bracket; using rate 0",
            inputs.target_future_value,
        )
    rows = build_schedule(inputs, solution.rate)

    return PlanEvaluation(
        summary=summarize(inputs, rows, solution.rate, solution.solved),
        rows=rows,
        ledger=ledger,
    )
