from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import ProjectStatus
from core.domain.identifiers import generate_id


@dataclass
class Project:
    id: str
    title: str
    description: str = ""
    client_name: Optional[str] = None
    status: ProjectStatus = ProjectStatus.PLANNED
    start_date: Optional[date] = None
    deadline: Optional[date] = None
    # Derived cache of approved quote revenue once documents exist.
    budget_total: float = 0.0

    @staticmethod
    def create(title: str, description: str = "", **extra) -> "Project":
        return Project(
            id=generate_id(),
            title=title,
            description=description,
            **extra,
        )


__all__ = ["Project"]
