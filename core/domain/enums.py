from __future__ import annotations

from enum import Enum


class ProjectStatus(str, Enum):
    PLANNED = "PLANNED"
    ACTIVE = "ACTIVE"
    ON_HOLD = "ON_HOLD"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    DONE = "DONE"


class DocumentType(str, Enum):
    QUOTE = "quote"
    INVOICE = "invoice"
    CREDIT_NOTE = "credit_note"


class DocumentStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    APPROVED = "approved"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class TimeEntryStatus(str, Enum):
    SUBMITTED = "SUBMITTED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    BILLED = "BILLED"


class ServiceCategory(str, Enum):
    CONSULTING = "CONSULTING"
    CREATION = "CREATION"
    PRODUCTION = "PRODUCTION"
    MANAGEMENT = "MANAGEMENT"
    LOGISTICS = "LOGISTICS"


class MarginStatus(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    ACCEPTABLE = "acceptable"
    POOR = "poor"
    NEGATIVE = "negative"
    UNKNOWN = "unknown"


class VarianceStatus(str, Enum):
    UNDER_BUDGET = "under_budget"
    ON_BUDGET = "on_budget"
    OVER_BUDGET = "over_budget"


__all__ = [
    "ProjectStatus",
    "TaskStatus",
    "DocumentType",
    "DocumentStatus",
    "TimeEntryStatus",
    "ServiceCategory",
    "MarginStatus",
    "VarianceStatus",
]
