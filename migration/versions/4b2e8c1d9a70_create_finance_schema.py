"""create finance schema

Revision ID: 4b2e8c1d9a70
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "4b2e8c1d9a70"
down_revision = None
branch_labels = None
depends_on = None

# Enum columns store member names.
_PROJECT_STATUS = sa.Enum("PLANNED", "ACTIVE", "ON_HOLD", "COMPLETED", "CANCELLED", name="projectstatus")
_TASK_STATUS = sa.Enum("TODO", "IN_PROGRESS", "REVIEW", "DONE", name="taskstatus")
_TIME_ENTRY_STATUS = sa.Enum("SUBMITTED", "APPROVED", "REJECTED", "BILLED", name="timeentrystatus")
_SERVICE_CATEGORY = sa.Enum(
    "CONSULTING", "CREATION", "PRODUCTION", "MANAGEMENT", "LOGISTICS", name="servicecategory"
)
_DOCUMENT_TYPE = sa.Enum("QUOTE", "INVOICE", "CREDIT_NOTE", name="documenttype")
_DOCUMENT_STATUS = sa.Enum(
    "DRAFT", "SENT", "APPROVED", "PAID", "OVERDUE", "CANCELLED", name="documentstatus"
)


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("client_name", sa.String(), nullable=True),
        sa.Column("status", _PROJECT_STATUS, nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.Column("budget_total", sa.Float(), nullable=False, server_default=sa.text("0")),
    )
    op.create_table(
        "people",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("full_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("billable_hourly_rate", sa.Float(), nullable=False, server_default=sa.text("0")),
        sa.Column("internal_cost_per_hour", sa.Float(), nullable=False, server_default=sa.text("0")),
        sa.Column("weekly_hours", sa.Float(), nullable=False, server_default=sa.text("40")),
    )
    op.create_table(
        "service_modules",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("category", _SERVICE_CATEGORY, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("default_unit", sa.String(length=16), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
    )
    op.create_table(
        "seniority_levels",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("level_name", sa.String(), nullable=False),
        sa.Column("level_order", sa.Integer(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
    )
    op.create_table(
        "service_pricing",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "service_module_id",
            sa.String(),
            sa.ForeignKey("service_modules.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "seniority_level_id",
            sa.String(),
            sa.ForeignKey("seniority_levels.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("rate", sa.Float(), nullable=False),
        sa.Column("internal_cost", sa.Float(), nullable=True),
        sa.Column("valid_from", sa.Date(), nullable=True),
        sa.Column("valid_until", sa.Date(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
    )
    op.create_index(
        "idx_service_pricing_pair",
        "service_pricing",
        ["service_module_id", "seniority_level_id"],
    )
    op.create_table(
        "tasks",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("project_id", sa.String(), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("status", _TASK_STATUS, nullable=False),
        sa.Column("assigned_to", sa.String(), sa.ForeignKey("people.id", ondelete="SET NULL"), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column(
            "service_module_id",
            sa.String(),
            sa.ForeignKey("service_modules.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "seniority_level_id",
            sa.String(),
            sa.ForeignKey("seniority_levels.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("estimated_hours", sa.Float(), nullable=True),
        sa.Column("estimated_rate", sa.Float(), nullable=True),
    )
    op.create_index("idx_tasks_project_id", "tasks", ["project_id"])
    op.create_index("idx_tasks_service_module_id", "tasks", ["service_module_id"])
    op.create_table(
        "time_entries",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("project_id", sa.String(), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("task_id", sa.String(), sa.ForeignKey("tasks.id", ondelete="SET NULL"), nullable=True),
        sa.Column("person_id", sa.String(), sa.ForeignKey("people.id", ondelete="CASCADE"), nullable=False),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=True),
        sa.Column("duration_minutes", sa.Integer(), nullable=True),
        sa.Column("billable", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("status", _TIME_ENTRY_STATUS, nullable=False),
    )
    op.create_index("idx_time_entries_project_id", "time_entries", ["project_id"])
    op.create_index("idx_time_entries_task_id", "time_entries", ["task_id"])
    op.create_index("idx_time_entries_person_id", "time_entries", ["person_id"])
    op.create_table(
        "costs",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("project_id", sa.String(), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False, server_default=sa.text("0")),
        sa.Column("category", sa.String(), nullable=True),
        sa.Column("is_estimated", sa.Boolean(), nullable=True),
    )
    op.create_index("idx_costs_project_id", "costs", ["project_id"])
    op.create_table(
        "financial_documents",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("project_id", sa.String(), sa.ForeignKey("projects.id", ondelete="SET NULL"), nullable=True),
        sa.Column("doc_type", _DOCUMENT_TYPE, nullable=False),
        sa.Column("status", _DOCUMENT_STATUS, nullable=False),
        sa.Column("document_number", sa.String(), nullable=True),
        sa.Column("date_issued", sa.Date(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("total_net", sa.Float(), nullable=False, server_default=sa.text("0")),
        sa.Column("vat_percent", sa.Float(), nullable=False, server_default=sa.text("19")),
        sa.Column("total_gross", sa.Float(), nullable=False, server_default=sa.text("0")),
    )
    op.create_index("idx_financial_documents_project_id", "financial_documents", ["project_id"])


def downgrade() -> None:
    op.drop_index("idx_financial_documents_project_id", table_name="financial_documents")
    op.drop_table("financial_documents")
    op.drop_index("idx_costs_project_id", table_name="costs")
    op.drop_table("costs")
    op.drop_index("idx_time_entries_person_id", table_name="time_entries")
    op.drop_index("idx_time_entries_task_id", table_name="time_entries")
    op.drop_index("idx_time_entries_project_id", table_name="time_entries")
    op.drop_table("time_entries")
    op.drop_index("idx_tasks_service_module_id", table_name="tasks")
    op.drop_index("idx_tasks_project_id", table_name="tasks")
    op.drop_table("tasks")
    op.drop_index("idx_service_pricing_pair", table_name="service_pricing")
    op.drop_table("service_pricing")
    op.drop_table("seniority_levels")
    op.drop_table("service_modules")
    op.drop_table("people")
    op.drop_table("projects")
