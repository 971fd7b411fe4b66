from __future__ import annotations

import logging
from threading import RLock
from typing import TYPE_CHECKING, Optional
from weakref import WeakKeyDictionary

from sqlalchemy.orm import Session

from core.events.domain_events import DomainEvents, domain_events
from core.interfaces import ProjectRepository

if TYPE_CHECKING:
    from core.services.finance.service import FinanceService

logger = logging.getLogger(__name__)

# At most one synchronizer listens on a bus; attaching a new one replaces the old.
_attached: "WeakKeyDictionary[DomainEvents, BudgetSynchronizer]" = WeakKeyDictionary()
_attach_lock = RLock()


class BudgetSynchronizer:
    """
    Keeps a project's stored budget equal to its approved-quote revenue.

    Failures are logged and swallowed: the document change that triggered the
    sync has already been committed and must not be reported as failed. This
    covers subscribers of the project_changed notification as well.
    """

    def __init__(
        self,
        session: Session,
        project_repo: ProjectRepository,
        finance_service: "FinanceService",
    ):
        self._session: Session = session
        self._project_repo: ProjectRepository = project_repo
        self._finance: "FinanceService" = finance_service
        self._events: Optional[DomainEvents] = None

    @property
    def events(self) -> DomainEvents:
        """The bus this synchronizer listens on, or the global bus when detached."""
        return self._events or domain_events

    @property
    def is_attached(self) -> bool:
        return self._events is not None

    def sync_project_budget(self, project_id: str) -> bool:
        try:
            revenue = self._finance.calculate_project_revenue(project_id)
            self._project_repo.update_budget(project_id, revenue)
            self._session.commit()
        except Exception:
            self._session.rollback()
            logger.exception("Budget sync failed for project %s", project_id)
            return False

        logger.info("Synced budget of project %s to %.2f", project_id, revenue)
        try:
            self.events.project_changed.emit(project_id)
        except Exception:
            logger.exception("project_changed handler failed for project %s", project_id)
        return True

    def attach(self, events: DomainEvents = domain_events) -> None:
        with _attach_lock:
            if self._events is not None and self._events is not events:
                self.detach()
            current = _attached.get(events)
            if current is not None and current is not self:
                current.detach()
                logger.info("Replaced budget synchronizer on event bus")
            events.revenue_documents_changed.connect(self.sync_project_budget)
            _attached[events] = self
            self._events = events

    def detach(self) -> None:
        with _attach_lock:
            if self._events is None:
                return
            events = self._events
            events.revenue_documents_changed.disconnect(self.sync_project_budget)
            if _attached.get(events) is self:
                del _attached[events]
            self._events = None


__all__ = ["BudgetSynchronizer"]
