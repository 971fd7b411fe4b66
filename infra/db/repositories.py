# infra/db/repositories.py
"""Single import point for the SQLAlchemy repositories."""

from infra.db.catalog.repository import SqlAlchemyServiceCatalogRepository
from infra.db.finance.repository import (
    SqlAlchemyCostRepository,
    SqlAlchemyRevenueDocumentRepository,
)
from infra.db.project.repository import (
    SqlAlchemyPersonRepository,
    SqlAlchemyProjectRepository,
)
from infra.db.task.repository import (
    SqlAlchemyTaskRepository,
    SqlAlchemyTimeEntryRepository,
)

__all__ = [
    "SqlAlchemyProjectRepository",
    "SqlAlchemyPersonRepository",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyTimeEntryRepository",
    "SqlAlchemyCostRepository",
    "SqlAlchemyRevenueDocumentRepository",
    "SqlAlchemyServiceCatalogRepository",
]
