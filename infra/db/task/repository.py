from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import TaskRepository, TimeEntryRepository
from core.models import Task, TimeEntry
from infra.db.models import TaskORM, TimeEntryORM
from infra.db.task.mapper import task_from_orm, task_to_orm, time_entry_from_orm, time_entry_to_orm


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, task: Task) -> None:
        self.session.add(task_to_orm(task))

    def get(self, task_id: str) -> Optional[Task]:
        obj = self.session.get(TaskORM, task_id)
        return task_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[Task]:
        stmt = select(TaskORM).where(TaskORM.project_id == project_id)
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]

    def list_service_tracked(self, project_id: str) -> List[Task]:
        stmt = select(TaskORM).where(
            TaskORM.project_id == project_id,
            TaskORM.service_module_id.is_not(None),
        )
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]

    def list_by_service_modules(self, service_module_ids: Iterable[str]) -> List[Task]:
        ids = list(set(service_module_ids))
        if not ids:
            return []
        stmt = select(TaskORM).where(TaskORM.service_module_id.in_(ids))
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]


class SqlAlchemyTimeEntryRepository(TimeEntryRepository):
    """Completed means end_time is set; running timers never leave the database."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, entry: TimeEntry) -> None:
        self.session.add(time_entry_to_orm(entry))

    def _list_completed(self, *criteria) -> List[TimeEntry]:
        stmt = (
            select(TimeEntryORM)
            .where(TimeEntryORM.end_time.is_not(None), *criteria)
            .order_by(TimeEntryORM.start_time, TimeEntryORM.id)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [time_entry_from_orm(row) for row in rows]

    def list_completed_by_project(self, project_id: str) -> List[TimeEntry]:
        return self._list_completed(TimeEntryORM.project_id == project_id)

    def list_completed_by_task(self, task_id: str) -> List[TimeEntry]:
        return self._list_completed(TimeEntryORM.task_id == task_id)

    def list_completed_by_tasks(self, task_ids: List[str]) -> List[TimeEntry]:
        if not task_ids:
            return []
        return self._list_completed(TimeEntryORM.task_id.in_(list(task_ids)))


__all__ = ["SqlAlchemyTaskRepository", "SqlAlchemyTimeEntryRepository"]
