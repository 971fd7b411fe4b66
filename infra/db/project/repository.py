from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.interfaces import PersonRepository, ProjectRepository
from core.models import Person, Project
from infra.db.models import PersonORM, ProjectORM
from infra.db.project.mapper import person_from_orm, person_to_orm, project_from_orm, project_to_orm


class SqlAlchemyProjectRepository(ProjectRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, project: Project) -> None:
        self.session.add(project_to_orm(project))

    def get(self, project_id: str) -> Optional[Project]:
        obj = self.session.get(ProjectORM, project_id)
        return project_from_orm(obj) if obj else None

    def list_all(self) -> List[Project]:
        stmt = select(ProjectORM)
        rows = self.session.execute(stmt).scalars().all()
        return [project_from_orm(row) for row in rows]

    def update_budget(self, project_id: str, budget_total: float) -> None:
        result = self.session.execute(
            update(ProjectORM)
            .where(ProjectORM.id == project_id)
            .values(budget_total=float(budget_total))
        )
        if result.rowcount == 0:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")


class SqlAlchemyPersonRepository(PersonRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, person: Person) -> None:
        self.session.add(person_to_orm(person))

    def get(self, person_id: str) -> Optional[Person]:
        obj = self.session.get(PersonORM, person_id)
        return person_from_orm(obj) if obj else None

    def list_by_ids(self, person_ids: Iterable[str]) -> List[Person]:
        ids = list(set(person_ids))
        if not ids:
            return []
        stmt = select(PersonORM).where(PersonORM.id.in_(ids))
        rows = self.session.execute(stmt).scalars().all()
        return [person_from_orm(row) for row in rows]

    def update(self, person: Person) -> None:
        obj = self.session.get(PersonORM, person.id)
        if not obj:
            raise NotFoundError("Person not found.", code="PERSON_NOT_FOUND")
        obj.full_name = person.full_name
        obj.email = person.email
        obj.billable_hourly_rate = person.billable_hourly_rate
        obj.internal_cost_per_hour = person.internal_cost_per_hour
        obj.weekly_hours = person.weekly_hours


__all__ = ["SqlAlchemyProjectRepository", "SqlAlchemyPersonRepository"]
