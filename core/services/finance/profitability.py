from __future__ import annotations

from collections import defaultdict
from typing import Dict, List

from core.interfaces import (
    RevenueDocumentRepository,
    ServiceCatalogRepository,
    TaskRepository,
    TimeEntryRepository,
)
from core.models import DocumentStatus, DocumentType, RevenueDocument, Task
from core.services.finance.aggregation import sum_approved_revenue
from core.services.finance.models import ServiceProfitability
from core.services.finance.rates import RateResolver


def planned_value_shares(tasks: List[Task]) -> Dict[str, Dict[str, float]]:
    """
    Per project, each service module's share of the project's planned value.

    Planned value is estimated hours times estimated rate over the project's
    estimated tasks. Projects whose planned value is zero get no shares.
    """
    planned: Dict[str, Dict[str, float]] = {}
    for task in tasks:
        if not task.service_module_id or not task.is_estimated:
            continue
        by_module = planned.setdefault(task.project_id, {})
        value = float(task.estimated_hours) * float(task.estimated_rate)
        by_module[task.service_module_id] = by_module.get(task.service_module_id, 0.0) + value

    shares: Dict[str, Dict[str, float]] = {}
    for project_id, by_module in planned.items():
        total = sum(by_module.values())
        if total <= 0:
            continue
        shares[project_id] = {module_id: value / total for module_id, value in by_module.items()}
    return shares


class FinanceServiceProfitabilityMixin:
    _task_repo: TaskRepository
    _time_entry_repo: TimeEntryRepository
    _document_repo: RevenueDocumentRepository
    _catalog_repo: ServiceCatalogRepository
    _rate_resolver: RateResolver

    def get_service_profitability(self) -> List[ServiceProfitability]:
        """
        Revenue, internal cost and profit per active service module, across all projects.

        Approved quotes carry no service lines, so each project's approved-quote
        revenue is split across the service modules of its tasks in proportion
        to their planned value. Cost is every completed entry on the module's
        tasks, billable or not, at the person's internal cost rate. Rows are
        ordered by profit, highest first.
        """
        modules = self._catalog_repo.list_service_modules(active_only=True)
        if not modules:
            return []

        tasks = self._task_repo.list_by_service_modules([module.id for module in modules])
        revenue_by_module = self._attribute_revenue(tasks)

        module_by_task = {task.id: task.service_module_id for task in tasks}
        task_count: Dict[str, int] = defaultdict(int)
        for task in tasks:
            task_count[task.service_module_id] += 1

        entries = self._time_entry_repo.list_completed_by_tasks(list(module_by_task))
        cost_rates = self._rate_resolver.resolve_internal_cost_rates(entries)
        hours_by_module: Dict[str, float] = defaultdict(float)
        cost_by_module: Dict[str, float] = defaultdict(float)
        for entry in entries:
            module_id = module_by_task.get(entry.task_id)
            if module_id is None or not entry.is_completed:
                continue
            hours = entry.hours
            hours_by_module[module_id] += hours
            cost_by_module[module_id] += hours * float(cost_rates.get(entry.id, 0.0) or 0.0)

        stats: List[ServiceProfitability] = []
        for module in modules:
            revenue = revenue_by_module.get(module.id, 0.0)
            cost = cost_by_module.get(module.id, 0.0)
            profit = revenue - cost
            stats.append(
                ServiceProfitability(
                    service_module_id=module.id,
                    service_name=module.name,
                    category=module.category,
                    revenue=revenue,
                    cost=cost,
                    profit=profit,
                    margin_percentage=(profit / revenue) * 100.0 if revenue > 0 else 0.0,
                    task_count=task_count.get(module.id, 0),
                    hours_tracked=hours_by_module.get(module.id, 0.0),
                )
            )

        stats.sort(key=lambda stat: stat.profit, reverse=True)
        return stats

    def _attribute_revenue(self, tasks: List[Task]) -> Dict[str, float]:
        shares = planned_value_shares(tasks)
        if not shares:
            return {}

        documents = self._document_repo.list_by_projects(
            shares.keys(),
            doc_type=DocumentType.QUOTE,
            status=DocumentStatus.APPROVED,
        )
        by_project: Dict[str, List[RevenueDocument]] = defaultdict(list)
        for document in documents:
            by_project[document.project_id].append(document)

        revenue_by_module: Dict[str, float] = defaultdict(float)
        for project_id, project_documents in by_project.items():
            revenue = sum_approved_revenue(project_documents)
            for module_id, share in shares[project_id].items():
                revenue_by_module[module_id] += revenue * share
        return revenue_by_module


__all__ = ["FinanceServiceProfitabilityMixin", "planned_value_shares"]
