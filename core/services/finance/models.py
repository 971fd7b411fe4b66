from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from core.models import MarginStatus, ServiceCategory, VarianceStatus


@dataclass(frozen=True)
class CostBreakdown:
    direct: float
    time_value: float
    total: float


@dataclass(frozen=True)
class ProjectMargin:
    project_id: str
    revenue: float
    costs: CostBreakdown
    profit: float
    margin_percentage: float
    status: MarginStatus


@dataclass(frozen=True)
class MarginSummary:
    profit: float
    margin_percentage: float
    status: MarginStatus

    @staticmethod
    def from_margin(margin: ProjectMargin) -> "MarginSummary":
        return MarginSummary(
            profit=margin.profit,
            margin_percentage=margin.margin_percentage,
            status=margin.status,
        )

    @staticmethod
    def unknown() -> "MarginSummary":
        return MarginSummary(profit=0.0, margin_percentage=0.0, status=MarginStatus.UNKNOWN)


@dataclass(frozen=True)
class TimeValueTotals:
    billable_hours: float
    billable_value: float


@dataclass(frozen=True)
class TaskActuals:
    hours: float
    value: float
    rates: tuple[float, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TaskVariance:
    task_id: str
    task_title: str
    estimated_hours: float
    estimated_rate: float
    planned_value: float
    actual_hours: float
    actual_rates: list[float]
    actual_value: float
    hours_variance: float
    hours_variance_percent: float
    value_variance: float
    value_variance_percent: float
    status: VarianceStatus


@dataclass(frozen=True)
class ServiceBreakdownRow:
    service_module_id: str
    service_module_name: str
    seniority_level_id: Optional[str]
    seniority_level_name: Optional[str]
    task_count: int
    total_estimated_hours: float
    total_planned_value: float
    total_actual_hours: float
    total_actual_value: float
    hours_variance: float
    value_variance: float
    value_variance_percent: float
    status: VarianceStatus


@dataclass(frozen=True)
class ServiceProfitability:
    service_module_id: str
    service_name: str
    category: ServiceCategory
    revenue: float
    cost: float
    profit: float
    margin_percentage: float
    task_count: int
    hours_tracked: float


__all__ = [
    "CostBreakdown",
    "ProjectMargin",
    "MarginSummary",
    "TimeValueTotals",
    "TaskActuals",
    "TaskVariance",
    "ServiceBreakdownRow",
    "ServiceProfitability",
]
