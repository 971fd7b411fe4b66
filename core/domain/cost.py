from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.domain.identifiers import generate_id


@dataclass
class Cost:
    id: str
    project_id: str
    title: str
    amount: float
    category: Optional[str] = None
    # Informational only; estimated costs still count as direct cost.
    is_estimated: bool = False

    @staticmethod
    def create(
        project_id: str,
        title: str,
        amount: float,
        category: Optional[str] = None,
        is_estimated: bool = False,
    ) -> "Cost":
        return Cost(
            id=generate_id(),
            project_id=project_id,
            title=title,
            amount=amount,
            category=category,
            is_estimated=is_estimated,
        )


__all__ = ["Cost"]
