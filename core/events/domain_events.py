"""Change notifications for project-scoped financial records; payload is the project id."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.project_changed: Signal[str] = Signal()
        self.revenue_documents_changed: Signal[str] = Signal()


# SINGLE global instance
domain_events = DomainEvents()
