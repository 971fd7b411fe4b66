from __future__ import annotations

from typing import Iterable, Mapping

from core.models import Cost, RevenueDocument, TimeEntry
from core.services.finance.models import TaskActuals, TimeValueTotals


def sum_approved_revenue(documents: Iterable[RevenueDocument]) -> float:
    return float(
        sum(float(doc.total_net or 0.0) for doc in documents if doc.is_revenue_bearing)
    )


def sum_direct_costs(costs: Iterable[Cost]) -> float:
    return float(sum(float(cost.amount or 0.0) for cost in costs))


def sum_billable_time_value(
    entries: Iterable[TimeEntry],
    rates: Mapping[str, float],
) -> TimeValueTotals:
    """Value of completed, billable entries only; non-billable entries count for nothing."""
    hours_total = 0.0
    value_total = 0.0
    for entry in entries:
        if not entry.is_completed or not entry.billable:
            continue
        hours = entry.hours
        hours_total += hours
        value_total += hours * float(rates.get(entry.id, 0.0) or 0.0)
    return TimeValueTotals(billable_hours=hours_total, billable_value=value_total)


def accumulate_tracked_actuals(
    entries: Iterable[TimeEntry],
    rates: Mapping[str, float],
) -> TaskActuals:
    """Hours and value of every completed entry, billable or not.

    Unlike sum_billable_time_value this does not look at the billable flag.
    Rates above zero are reported once each, in first-seen order.
    """
    hours_total = 0.0
    value_total = 0.0
    seen_rates: list[float] = []
    for entry in entries:
        if not entry.is_completed:
            continue
        rate = float(rates.get(entry.id, 0.0) or 0.0)
        hours = entry.hours
        hours_total += hours
        value_total += hours * rate
        if rate > 0 and rate not in seen_rates:
            seen_rates.append(rate)
    return TaskActuals(hours=hours_total, value=value_total, rates=tuple(seen_rates))


def accumulate_tracked_actuals_by_task(
    entries: Iterable[TimeEntry],
    rates: Mapping[str, float],
) -> dict[str, TaskActuals]:
    by_task: dict[str, list[TimeEntry]] = {}
    for entry in entries:
        if not entry.task_id:
            continue
        by_task.setdefault(entry.task_id, []).append(entry)
    return {
        task_id: accumulate_tracked_actuals(task_entries, rates)
        for task_id, task_entries in by_task.items()
    }


__all__ = [
    "sum_approved_revenue",
    "sum_direct_costs",
    "sum_billable_time_value",
    "accumulate_tracked_actuals",
    "accumulate_tracked_actuals_by_task",
]
