from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BillingPeriod:
    start: int
    end: int

    def as_fields(self) -> dict[str, int]:
        return {
            "current_period_start": self.start,
            "current_period_end": self.end,
        }
