from __future__ import annotations

from core.interfaces import (
    CostRepository,
    RevenueDocumentRepository,
    ServiceCatalogRepository,
    TaskRepository,
    TimeEntryRepository,
)
from core.services.finance.batch import BatchMarginRunner
from core.services.finance.breakdown import FinanceServiceBreakdownMixin
from core.services.finance.margin import FinanceMarginMixin
from core.services.finance.profitability import FinanceServiceProfitabilityMixin
from core.services.finance.rates import RateResolver
from core.services.finance.variance import FinanceVarianceMixin


class FinanceService(
    FinanceMarginMixin,
    FinanceVarianceMixin,
    FinanceServiceBreakdownMixin,
    FinanceServiceProfitabilityMixin,
):
    """
    Read-only finance engine: margins, task variance, service breakdown and
    service profitability.

    Without an explicit batch_runner, batch margins run this instance's
    calculate_project_margin on worker threads, so the repositories must
    tolerate concurrent use. infra.services passes a session-per-project runner.
    """

    def __init__(
        self,
        *,
        task_repo: TaskRepository,
        time_entry_repo: TimeEntryRepository,
        cost_repo: CostRepository,
        document_repo: RevenueDocumentRepository,
        catalog_repo: ServiceCatalogRepository,
        rate_resolver: RateResolver,
        batch_runner: BatchMarginRunner | None = None,
    ) -> None:
        self._task_repo: TaskRepository = task_repo
        self._time_entry_repo: TimeEntryRepository = time_entry_repo
        self._cost_repo: CostRepository = cost_repo
        self._document_repo: RevenueDocumentRepository = document_repo
        self._catalog_repo: ServiceCatalogRepository = catalog_repo
        self._rate_resolver: RateResolver = rate_resolver
        self._batch_runner: BatchMarginRunner = batch_runner or BatchMarginRunner(
            self.calculate_project_margin
        )


__all__ = ["FinanceService"]
