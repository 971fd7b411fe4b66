# infra/db/models.py
from __future__ import annotations
from datetime import date, datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum as SAEnum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.models import (
    DocumentStatus,
    DocumentType,
    ProjectStatus,
    ServiceCategory,
    TaskStatus,
    TimeEntryStatus,
)


class ProjectORM(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    client_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    status: Mapped[ProjectStatus] = mapped_column(
        SAEnum(ProjectStatus), default=ProjectStatus.PLANNED, nullable=False
    )
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    deadline: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    # kept equal to approved quote revenue by budget sync
    budget_total: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)


class PersonORM(Base):
    __tablename__ = "people"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    full_name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    billable_hourly_rate: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    internal_cost_per_hour: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    weekly_hours: Mapped[float] = mapped_column(Float, default=40.0, nullable=False)


class ServiceModuleORM(Base):
    __tablename__ = "service_modules"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    category: Mapped[ServiceCategory] = mapped_column(SAEnum(ServiceCategory), nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    default_unit: Mapped[str] = mapped_column(String(16), default="hour")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class SeniorityLevelORM(Base):
    __tablename__ = "seniority_levels"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    level_name: Mapped[str] = mapped_column(String, nullable=False)
    level_order: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class ServicePricingORM(Base):
    __tablename__ = "service_pricing"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    service_module_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("service_modules.id", ondelete="CASCADE"),
        nullable=False,
    )
    seniority_level_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("seniority_levels.id", ondelete="CASCADE"),
        nullable=False,
    )
    rate: Mapped[float] = mapped_column(Float, nullable=False)
    internal_cost: Mapped[float] = mapped_column(Float, default=0.0)
    valid_from: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    valid_until: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
Index("idx_service_pricing_pair", ServicePricingORM.service_module_id, ServicePricingORM.seniority_level_id)


class TaskORM(Base):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    status: Mapped[TaskStatus] = mapped_column(
        SAEnum(TaskStatus), default=TaskStatus.TODO, nullable=False
    )
    assigned_to: Mapped[Optional[str]] = mapped_column(
        String,
        ForeignKey("people.id", ondelete="SET NULL"),
        nullable=True,
    )
    due_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    service_module_id: Mapped[Optional[str]] = mapped_column(
        String,
        ForeignKey("service_modules.id", ondelete="SET NULL"),
        nullable=True,
    )
    seniority_level_id: Mapped[Optional[str]] = mapped_column(
        String,
        ForeignKey("seniority_levels.id", ondelete="SET NULL"),
        nullable=True,
    )
    estimated_hours: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    estimated_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
Index("idx_tasks_project_id", TaskORM.project_id)
Index("idx_tasks_service_module_id", TaskORM.service_module_id)


class TimeEntryORM(Base):
    __tablename__ = "time_entries"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    task_id: Mapped[Optional[str]] = mapped_column(
        String,
        ForeignKey("tasks.id", ondelete="SET NULL"),
        nullable=True,
    )
    person_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("people.id", ondelete="CASCADE"),
        nullable=False,
    )
    start_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_time: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    duration_minutes: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    billable: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    status: Mapped[TimeEntryStatus] = mapped_column(
        SAEnum(TimeEntryStatus), default=TimeEntryStatus.SUBMITTED, nullable=False
    )
Index("idx_time_entries_project_id", TimeEntryORM.project_id)
Index("idx_time_entries_task_id", TimeEntryORM.task_id)
Index("idx_time_entries_person_id", TimeEntryORM.person_id)


class CostORM(Base):
    __tablename__ = "costs"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    amount: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    is_estimated: Mapped[bool] = mapped_column(Boolean, default=False)
Index("idx_costs_project_id", CostORM.project_id)


class FinancialDocumentORM(Base):
    __tablename__ = "financial_documents"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[Optional[str]] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
    )
    doc_type: Mapped[DocumentType] = mapped_column(SAEnum(DocumentType), nullable=False)
    status: Mapped[DocumentStatus] = mapped_column(
        SAEnum(DocumentStatus), default=DocumentStatus.DRAFT, nullable=False
    )
    document_number: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    date_issued: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    due_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    total_net: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    vat_percent: Mapped[float] = mapped_column(Float, default=19.0, nullable=False)
    total_gross: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
Index("idx_financial_documents_project_id", FinancialDocumentORM.project_id)
