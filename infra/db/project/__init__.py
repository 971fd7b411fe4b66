from infra.db.project.mapper import (
    person_from_orm,
    person_to_orm,
    project_from_orm,
    project_to_orm,
)
from infra.db.project.repository import (
    SqlAlchemyPersonRepository,
    SqlAlchemyProjectRepository,
)

__all__ = [
    "project_to_orm",
    "project_from_orm",
    "person_to_orm",
    "person_from_orm",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyPersonRepository",
]
