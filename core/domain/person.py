from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.domain.identifiers import generate_id


@dataclass
class Person:
    id: str
    full_name: str
    email: Optional[str] = None
    billable_hourly_rate: float = 0.0
    internal_cost_per_hour: float = 0.0
    weekly_hours: float = 40.0

    @staticmethod
    def create(
        full_name: str,
        email: Optional[str] = None,
        billable_hourly_rate: float = 0.0,
        internal_cost_per_hour: float = 0.0,
        weekly_hours: float = 40.0,
    ) -> "Person":
        return Person(
            id=generate_id(),
            full_name=full_name,
            email=email,
            billable_hourly_rate=billable_hourly_rate,
            internal_cost_per_hour=internal_cost_per_hour,
            weekly_hours=weekly_hours,
        )


__all__ = ["Person"]
