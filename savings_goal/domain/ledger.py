from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping

from savings_goal.schemas.plan import ScheduleRow


class LedgerValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass(frozen=True)
class PaymentLedger:
    """Which periods of a schedule have been marked as paid."""

    periods: int
    flags: Dict[int, bool] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[int, bool], periods: int) -> "PaymentLedger":
        errors: List[str] = []
        flags: Dict[int, bool] = {}
        for index, paid in sorted(mapping.items()):
            if not 1 <= index <= periods:
                errors.append(f"paid period {index} outside 1..{periods}")
                continue
            flags[index] = bool(paid)
        if errors:
            raise LedgerValidationError(errors)
        return cls(periods=periods, flags=flags)

    def is_paid(self, index: int) -> bool:
        return self.flags.get(index, False)

    def toggle(self, index: int) -> "PaymentLedger":
        if not 1 <= index <= self.periods:
            raise LedgerValidationError([f"paid period {index} outside 1..{self.periods}"])
        flags = dict(self.flags)
        flags[index] = not self.is_paid(index)
        return PaymentLedger(periods=self.periods, flags=flags)

    def paid_periods(self) -> List[int]:
        return sorted(index for index, paid in self.flags.items() if paid)

    def paid_total(self, rows: Iterable[ScheduleRow]) -> float:
        return sum(row.contribution for row in rows if self.is_paid(row.index))

    def pending_total(self, rows: Iterable[ScheduleRow]) -> float:
        return sum(row.contribution for row in rows if not self.is_paid(row.index))
