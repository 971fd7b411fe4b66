from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import TaskStatus
from core.domain.identifiers import generate_id


@dataclass
class Task:
    id: str
    project_id: str
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    assigned_to: Optional[str] = None
    due_date: Optional[date] = None
    service_module_id: Optional[str] = None
    seniority_level_id: Optional[str] = None
    estimated_hours: Optional[float] = None
    estimated_rate: Optional[float] = None

    @property
    def is_estimated(self) -> bool:
        # Zero is a valid estimate; only missing values opt the task out.
        return self.estimated_hours is not None and self.estimated_rate is not None

    @staticmethod
    def create(project_id: str, title: str, description: str = "", **extra) -> "Task":
        return Task(
            id=generate_id(),
            project_id=project_id,
            title=title,
            description=description,
            **extra,
        )


__all__ = ["Task"]
