from core.domain.catalog import SeniorityLevel, ServiceModule, ServicePricing
from core.domain.cost import Cost
from core.domain.document import DEFAULT_VAT_PERCENT, RevenueDocument
from core.domain.enums import (
    DocumentStatus,
    DocumentType,
    MarginStatus,
    ProjectStatus,
    ServiceCategory,
    TaskStatus,
    TimeEntryStatus,
    VarianceStatus,
)
from core.domain.identifiers import generate_id
from core.domain.person import Person
from core.domain.project import Project
from core.domain.task import Task
from core.domain.time_entry import TimeEntry

__all__ = [
    "generate_id",
    "ProjectStatus",
    "TaskStatus",
    "DocumentType",
    "DocumentStatus",
    "TimeEntryStatus",
    "ServiceCategory",
    "MarginStatus",
    "VarianceStatus",
    "Project",
    "Person",
    "Task",
    "TimeEntry",
    "Cost",
    "RevenueDocument",
    "DEFAULT_VAT_PERCENT",
    "ServiceModule",
    "SeniorityLevel",
    "ServicePricing",
]
