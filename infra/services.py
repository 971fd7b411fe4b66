from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from core.services.documents import RevenueDocumentService
from core.services.finance import (
    BatchMarginRunner,
    BudgetSynchronizer,
    CurrentProfileRateResolver,
    FinanceService,
)
from core.services.finance.batch import MarginCalculator
from core.services.finance.models import ProjectMargin
from infra.db.repositories import (
    SqlAlchemyCostRepository,
    SqlAlchemyPersonRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyRevenueDocumentRepository,
    SqlAlchemyServiceCatalogRepository,
    SqlAlchemyTaskRepository,
    SqlAlchemyTimeEntryRepository,
)
from infra.operational_support import bind_trace_id

logger = logging.getLogger(__name__)


def build_finance_service(session: Session, *, batch_runner: BatchMarginRunner | None = None) -> FinanceService:
    return FinanceService(
        task_repo=SqlAlchemyTaskRepository(session),
        time_entry_repo=SqlAlchemyTimeEntryRepository(session),
        cost_repo=SqlAlchemyCostRepository(session),
        document_repo=SqlAlchemyRevenueDocumentRepository(session),
        catalog_repo=SqlAlchemyServiceCatalogRepository(session),
        rate_resolver=CurrentProfileRateResolver(SqlAlchemyPersonRepository(session)),
        batch_runner=batch_runner,
    )


def isolated_margin_calculator(session: Session) -> MarginCalculator:
    """
    Margin calculator for worker threads.

    Sessions are not thread-safe, so each call opens its own session on the
    engine behind `session` and closes it afterwards. Log lines of one call
    share a trace id.
    """
    factory = sessionmaker(bind=session.get_bind(), autoflush=False, autocommit=False, future=True)

    def calculate(project_id: str) -> ProjectMargin:
        with bind_trace_id() as trace_id, factory() as worker_session:
            logger.debug("Calculating margin for project %s (trace %s)", project_id, trace_id)
            return build_finance_service(worker_session).calculate_project_margin(project_id)

    return calculate


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    finance_service: FinanceService
    document_service: RevenueDocumentService
    budget_synchronizer: BudgetSynchronizer
    batch_runner: BatchMarginRunner

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "finance_service": self.finance_service,
            "document_service": self.document_service,
            "budget_synchronizer": self.budget_synchronizer,
            "batch_runner": self.batch_runner,
        }

    def close(self) -> None:
        """Stops budget syncing and releases the session."""
        self.budget_synchronizer.detach()
        self.session.close()


def build_service_graph(
    session: Session,
    *,
    batch_size: int | None = None,
    attach_budget_sync: bool = True,
) -> ServiceGraph:
    """
    Wires the finance engine on `session`.

    With attach_budget_sync the new synchronizer takes over the global event
    bus from any synchronizer attached by an earlier graph.
    """
    project_repo = SqlAlchemyProjectRepository(session)
    document_repo = SqlAlchemyRevenueDocumentRepository(session)

    batch_runner = BatchMarginRunner(isolated_margin_calculator(session), batch_size=batch_size)
    finance_service = build_finance_service(session, batch_runner=batch_runner)
    document_service = RevenueDocumentService(
        session,
        document_repo=document_repo,
        project_repo=project_repo,
    )
    budget_synchronizer = BudgetSynchronizer(session, project_repo, finance_service)
    if attach_budget_sync:
        budget_synchronizer.attach()

    return ServiceGraph(
        session=session,
        finance_service=finance_service,
        document_service=document_service,
        budget_synchronizer=budget_synchronizer,
        batch_runner=batch_runner,
    )


def build_service_dict(session: Session, **options: Any) -> dict[str, Any]:
    return build_service_graph(session, **options).as_dict()


__all__ = [
    "ServiceGraph",
    "build_finance_service",
    "build_service_dict",
    "build_service_graph",
    "isolated_margin_calculator",
]
