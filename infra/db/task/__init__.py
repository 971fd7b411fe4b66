from infra.db.task.mapper import (
    task_from_orm,
    task_to_orm,
    time_entry_from_orm,
    time_entry_to_orm,
)
from infra.db.task.repository import (
    SqlAlchemyTaskRepository,
    SqlAlchemyTimeEntryRepository,
)

__all__ = [
    "task_to_orm",
    "task_from_orm",
    "time_entry_to_orm",
    "time_entry_from_orm",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyTimeEntryRepository",
]
