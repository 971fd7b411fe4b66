from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from core.interfaces import ServiceCatalogRepository, TaskRepository, TimeEntryRepository
from core.models import Task
from core.services.finance.aggregation import accumulate_tracked_actuals_by_task
from core.services.finance.models import ServiceBreakdownRow
from core.services.finance.policy import classify_variance, percent_of
from core.services.finance.rates import RateResolver

# (service_module_id, seniority_level_id); None groups tasks without a seniority level.
ServiceGroupKey = Tuple[str, Optional[str]]

UNKNOWN_SERVICE_NAME = "Unknown"


@dataclass
class _ServiceGroup:
    service_module_id: str
    seniority_level_id: Optional[str]
    task_ids: List[str] = field(default_factory=list)
    estimated_hours: float = 0.0
    planned_value: float = 0.0


def group_tasks_by_service(tasks: List[Task]) -> Dict[ServiceGroupKey, _ServiceGroup]:
    groups: Dict[ServiceGroupKey, _ServiceGroup] = {}
    for task in tasks:
        if not task.service_module_id or not task.is_estimated:
            continue
        key = (task.service_module_id, task.seniority_level_id or None)
        group = groups.get(key)
        if group is None:
            group = _ServiceGroup(service_module_id=key[0], seniority_level_id=key[1])
            groups[key] = group
        hours = float(task.estimated_hours)
        group.task_ids.append(task.id)
        group.estimated_hours += hours
        # each task's own rate, never a group rate
        group.planned_value += hours * float(task.estimated_rate)
    return groups


class FinanceServiceBreakdownMixin:
    _task_repo: TaskRepository
    _time_entry_repo: TimeEntryRepository
    _catalog_repo: ServiceCatalogRepository
    _rate_resolver: RateResolver

    def get_project_service_breakdown(self, project_id: str) -> List[ServiceBreakdownRow]:
        """
        Plan vs actual per (service, seniority) pair across the project's estimated tasks.

        Actuals follow the task variance rules: every completed entry counts,
        billable or not. Rows are ordered by planned value, highest first.
        """
        groups = group_tasks_by_service(self._task_repo.list_service_tracked(project_id))
        if not groups:
            return []

        task_ids = [task_id for group in groups.values() for task_id in group.task_ids]
        entries = self._time_entry_repo.list_completed_by_tasks(task_ids)
        rates = self._rate_resolver.resolve_billable_rates(entries)
        actuals_by_task = accumulate_tracked_actuals_by_task(entries, rates)

        rows: List[ServiceBreakdownRow] = []
        for group in groups.values():
            actual_hours = 0.0
            actual_value = 0.0
            for task_id in group.task_ids:
                actual = actuals_by_task.get(task_id)
                if actual is None:
                    continue
                actual_hours += actual.hours
                actual_value += actual.value

            value_variance = actual_value - group.planned_value
            value_variance_percent = percent_of(value_variance, group.planned_value)
            rows.append(
                ServiceBreakdownRow(
                    service_module_id=group.service_module_id,
                    service_module_name=self._service_module_name(group.service_module_id),
                    seniority_level_id=group.seniority_level_id,
                    seniority_level_name=self._seniority_level_name(group.seniority_level_id),
                    task_count=len(group.task_ids),
                    total_estimated_hours=group.estimated_hours,
                    total_planned_value=group.planned_value,
                    total_actual_hours=actual_hours,
                    total_actual_value=actual_value,
                    hours_variance=actual_hours - group.estimated_hours,
                    value_variance=value_variance,
                    value_variance_percent=value_variance_percent,
                    status=classify_variance(value_variance_percent),
                )
            )

        rows.sort(key=lambda row: row.total_planned_value, reverse=True)
        return rows

    def get_service_pricing_rate(
        self,
        service_module_id: str,
        seniority_level_id: str,
    ) -> float | None:
        """Active catalog rate for a service/seniority pair, used to prefill task estimates."""
        pricing = self._catalog_repo.get_active_pricing(service_module_id, seniority_level_id)
        if pricing is None:
            return None
        return float(pricing.rate) if pricing.rate else None

    def _service_module_name(self, module_id: str) -> str:
        module = self._catalog_repo.get_service_module(module_id)
        return module.name if module else UNKNOWN_SERVICE_NAME

    def _seniority_level_name(self, level_id: Optional[str]) -> Optional[str]:
        if level_id is None:
            return None
        level = self._catalog_repo.get_seniority_level(level_id)
        return level.level_name if level else None


__all__ = ["FinanceServiceBreakdownMixin", "ServiceGroupKey", "group_tasks_by_service"]
