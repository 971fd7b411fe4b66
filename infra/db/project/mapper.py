from __future__ import annotations

from core.models import Person, Project
from infra.db.models import PersonORM, ProjectORM


def project_to_orm(project: Project) -> ProjectORM:
    return ProjectORM(
        id=project.id,
        title=project.title,
        description=project.description,
        client_name=project.client_name,
        status=project.status,
        start_date=project.start_date,
        deadline=project.deadline,
        budget_total=project.budget_total,
    )


def project_from_orm(obj: ProjectORM) -> Project:
    return Project(
        id=obj.id,
        title=obj.title,
        description=obj.description or "",
        client_name=obj.client_name,
        status=obj.status,
        start_date=obj.start_date,
        deadline=obj.deadline,
        budget_total=float(obj.budget_total or 0.0),
    )


def person_to_orm(person: Person) -> PersonORM:
    return PersonORM(
        id=person.id,
        full_name=person.full_name,
        email=person.email,
        billable_hourly_rate=person.billable_hourly_rate,
        internal_cost_per_hour=person.internal_cost_per_hour,
        weekly_hours=person.weekly_hours,
    )


def person_from_orm(obj: PersonORM) -> Person:
    return Person(
        id=obj.id,
        full_name=obj.full_name,
        email=obj.email,
        billable_hourly_rate=float(obj.billable_hourly_rate or 0.0),
        internal_cost_per_hour=float(obj.internal_cost_per_hour or 0.0),
        weekly_hours=float(obj.weekly_hours or 0.0),
    )


__all__ = ["project_to_orm", "project_from_orm", "person_to_orm", "person_from_orm"]
