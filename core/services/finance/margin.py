from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from core.interfaces import CostRepository, RevenueDocumentRepository, TimeEntryRepository
from core.models import DocumentStatus, DocumentType
from core.services.finance.aggregation import (
    sum_approved_revenue,
    sum_billable_time_value,
    sum_direct_costs,
)
from core.services.finance.models import CostBreakdown, MarginSummary, ProjectMargin, TimeValueTotals
from core.services.finance.policy import classify_margin
from core.services.finance.rates import RateResolver

if TYPE_CHECKING:
    from core.services.finance.batch import BatchMarginRunner


class FinanceMarginMixin:
    _document_repo: RevenueDocumentRepository
    _cost_repo: CostRepository
    _time_entry_repo: TimeEntryRepository
    _rate_resolver: RateResolver
    _batch_runner: "BatchMarginRunner"

    def calculate_project_revenue(self, project_id: str) -> float:
        """Sum of net amounts of approved quotes; 0 when there are none."""
        documents = self._document_repo.list_by_project(
            project_id,
            doc_type=DocumentType.QUOTE,
            status=DocumentStatus.APPROVED,
        )
        return sum_approved_revenue(documents)

    def calculate_direct_costs(self, project_id: str) -> float:
        return sum_direct_costs(self._cost_repo.list_by_project(project_id))

    def calculate_time_value(self, project_id: str) -> TimeValueTotals:
        entries = self._time_entry_repo.list_completed_by_project(project_id)
        rates = self._rate_resolver.resolve_billable_rates(entries)
        return sum_billable_time_value(entries, rates)

    def calculate_project_margin(self, project_id: str) -> ProjectMargin:
        """
        Revenue vs direct cost + billable time value.

        A project without revenue has a margin percentage of 0 even when it
        carries costs; its profit is still negative. Query failures propagate.
        """
        revenue = self.calculate_project_revenue(project_id)
        direct = self.calculate_direct_costs(project_id)
        time_value = self.calculate_time_value(project_id).billable_value
        total = direct + time_value

        profit = revenue - total
        margin_percentage = (profit / revenue) * 100.0 if revenue > 0 else 0.0

        return ProjectMargin(
            project_id=project_id,
            revenue=revenue,
            costs=CostBreakdown(direct=direct, time_value=time_value, total=total),
            profit=profit,
            margin_percentage=margin_percentage,
            status=classify_margin(margin_percentage),
        )

    def calculate_margins_batch(self, project_ids: Iterable[str]) -> dict[str, MarginSummary]:
        return self._batch_runner.run(project_ids)


__all__ = ["FinanceMarginMixin"]
