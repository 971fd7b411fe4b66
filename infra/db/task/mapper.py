from __future__ import annotations

from core.models import Task, TimeEntry
from infra.db.models import TaskORM, TimeEntryORM


def task_to_orm(task: Task) -> TaskORM:
    return TaskORM(
        id=task.id,
        project_id=task.project_id,
        title=task.title,
        description=task.description,
        status=task.status,
        assigned_to=task.assigned_to,
        due_date=task.due_date,
        service_module_id=task.service_module_id,
        seniority_level_id=task.seniority_level_id,
        estimated_hours=task.estimated_hours,
        estimated_rate=task.estimated_rate,
    )


def task_from_orm(obj: TaskORM) -> Task:
    return Task(
        id=obj.id,
        project_id=obj.project_id,
        title=obj.title,
        description=obj.description or "",
        status=obj.status,
        assigned_to=obj.assigned_to,
        due_date=obj.due_date,
        service_module_id=obj.service_module_id,
        seniority_level_id=obj.seniority_level_id,
        # None survives the round trip; 0 is a real estimate
        estimated_hours=obj.estimated_hours,
        estimated_rate=obj.estimated_rate,
    )


def time_entry_to_orm(entry: TimeEntry) -> TimeEntryORM:
    return TimeEntryORM(
        id=entry.id,
        project_id=entry.project_id,
        task_id=entry.task_id,
        person_id=entry.person_id,
        start_time=entry.start_time,
        end_time=entry.end_time,
        duration_minutes=entry.duration_minutes,
        billable=entry.billable,
        status=entry.status,
    )


def time_entry_from_orm(obj: TimeEntryORM) -> TimeEntry:
    return TimeEntry(
        id=obj.id,
        project_id=obj.project_id,
        task_id=obj.task_id,
        person_id=obj.person_id,
        start_time=obj.start_time,
        end_time=obj.end_time,
        duration_minutes=obj.duration_minutes,
        billable=bool(obj.billable),
        status=obj.status,
    )


__all__ = ["task_to_orm", "task_from_orm", "time_entry_to_orm", "time_entry_from_orm"]
