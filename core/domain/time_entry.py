from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.enums import TimeEntryStatus
from core.domain.identifiers import generate_id


@dataclass
class TimeEntry:
    id: str
    project_id: str
    person_id: str
    start_time: datetime
    task_id: Optional[str] = None
    end_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    billable: bool = True
    status: TimeEntryStatus = TimeEntryStatus.SUBMITTED

    @property
    def is_completed(self) -> bool:
        return self.end_time is not None

    @property
    def hours(self) -> float:
        return float(self.duration_minutes or 0) / 60.0

    @staticmethod
    def create(
        project_id: str,
        person_id: str,
        start_time: datetime,
        task_id: Optional[str] = None,
        end_time: Optional[datetime] = None,
        duration_minutes: Optional[int] = None,
        billable: bool = True,
        status: TimeEntryStatus = TimeEntryStatus.SUBMITTED,
    ) -> "TimeEntry":
        return TimeEntry(
            id=generate_id(),
            project_id=project_id,
            person_id=person_id,
            start_time=start_time,
            task_id=task_id,
            end_time=end_time,
            duration_minutes=duration_minutes,
            billable=billable,
            status=status,
        )


__all__ = ["TimeEntry"]
