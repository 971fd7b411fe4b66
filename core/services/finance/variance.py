from __future__ import annotations

import logging
from typing import List

from core.exceptions import NotFoundError
from core.interfaces import TaskRepository, TimeEntryRepository
from core.models import Task
from core.services.finance.aggregation import accumulate_tracked_actuals
from core.services.finance.models import TaskActuals, TaskVariance
from core.services.finance.policy import classify_variance, percent_of
from core.services.finance.rates import RateResolver

logger = logging.getLogger(__name__)


def build_task_variance(task: Task, actuals: TaskActuals) -> TaskVariance:
    estimated_hours = float(task.estimated_hours)
    estimated_rate = float(task.estimated_rate)
    planned_value = estimated_hours * estimated_rate

    hours_variance = actuals.hours - estimated_hours
    value_variance = actuals.value - planned_value
    value_variance_percent = percent_of(value_variance, planned_value)

    return TaskVariance(
        task_id=task.id,
        task_title=task.title,
        estimated_hours=estimated_hours,
        estimated_rate=estimated_rate,
        planned_value=planned_value,
        actual_hours=actuals.hours,
        actual_rates=list(actuals.rates),
        actual_value=actuals.value,
        hours_variance=hours_variance,
        hours_variance_percent=percent_of(hours_variance, estimated_hours),
        value_variance=value_variance,
        value_variance_percent=value_variance_percent,
        status=classify_variance(value_variance_percent),
    )


class FinanceVarianceMixin:
    _task_repo: TaskRepository
    _time_entry_repo: TimeEntryRepository
    _rate_resolver: RateResolver

    def calculate_task_actuals(self, task_id: str) -> TaskActuals:
        entries = self._time_entry_repo.list_completed_by_task(task_id)
        rates = self._rate_resolver.resolve_billable_rates(entries)
        return accumulate_tracked_actuals(entries, rates)

    def calculate_task_variance(self, task_id: str) -> TaskVariance | None:
        """
        Plan vs actual for one task.

        Returns None when the task has no estimated hours or no estimated rate:
        the task is not service-tracked, which is different from a zero variance.
        """
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        if not task.is_estimated:
            return None
        return build_task_variance(task, self.calculate_task_actuals(task.id))

    def calculate_project_task_variances(self, project_id: str) -> List[TaskVariance]:
        variances: List[TaskVariance] = []
        for task in self._task_repo.list_service_tracked(project_id):
            try:
                variance = self.calculate_task_variance(task.id)
            except Exception:
                # keep the remaining tasks visible
                logger.exception("Variance calculation failed for task %s", task.id)
                continue
            if variance is not None:
                variances.append(variance)
        return variances


__all__ = ["FinanceVarianceMixin", "build_task_variance"]
