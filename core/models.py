from __future__ import annotations

from core.domain import (
    DEFAULT_VAT_PERCENT,
    Cost,
    DocumentStatus,
    DocumentType,
    MarginStatus,
    Person,
    Project,
    ProjectStatus,
    RevenueDocument,
    SeniorityLevel,
    ServiceCategory,
    ServiceModule,
    ServicePricing,
    Task,
    TaskStatus,
    TimeEntry,
    TimeEntryStatus,
    VarianceStatus,
    generate_id,
)

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
