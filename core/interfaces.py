from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from core.models import (
    Cost,
    DocumentStatus,
    DocumentType,
    Person,
    Project,
    RevenueDocument,
    SeniorityLevel,
    ServiceModule,
    ServicePricing,
    Task,
    TimeEntry,
)


class ProjectRepository(ABC):
    @abstractmethod
    def add(self, project: Project) -> None: ...

    @abstractmethod
    def get(self, project_id: str) -> Optional[Project]: ...

    @abstractmethod
    def list_all(self) -> List[Project]: ...

    @abstractmethod
    def update_budget(self, project_id: str, budget_total: float) -> None: ...


class PersonRepository(ABC):
    @abstractmethod
    def add(self, person: Person) -> None: ...

    @abstractmethod
    def get(self, person_id: str) -> Optional[Person]: ...

    @abstractmethod
    def list_by_ids(self, person_ids: Iterable[str]) -> List[Person]: ...

    @abstractmethod
    def update(self, person: Person) -> None: ...


class TaskRepository(ABC):
    @abstractmethod
    def add(self, task: Task) -> None: ...

    @abstractmethod
    def get(self, task_id: str) -> Optional[Task]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Task]: ...

    @abstractmethod
    def list_service_tracked(self, project_id: str) -> List[Task]:
        """Tasks of the project that reference a service module."""

    @abstractmethod
    def list_by_service_modules(self, service_module_ids: Iterable[str]) -> List[Task]:
        """Tasks of any project that reference one of the given service modules."""


class TimeEntryRepository(ABC):
    @abstractmethod
    def add(self, entry: TimeEntry) -> None: ...

    @abstractmethod
    def list_completed_by_project(self, project_id: str) -> List[TimeEntry]: ...

    @abstractmethod
    def list_completed_by_task(self, task_id: str) -> List[TimeEntry]: ...

    @abstractmethod
    def list_completed_by_tasks(self, task_ids: List[str]) -> List[TimeEntry]: ...


class CostRepository(ABC):
    @abstractmethod
    def add(self, cost: Cost) -> None: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Cost]: ...


class RevenueDocumentRepository(ABC):
    @abstractmethod
    def add(self, document: RevenueDocument) -> None: ...

    @abstractmethod
    def get(self, document_id: str) -> Optional[RevenueDocument]: ...

    @abstractmethod
    def update(self, document: RevenueDocument) -> None: ...

    @abstractmethod
    def delete(self, document_id: str) -> None: ...

    @abstractmethod
    def list_by_project(
        self,
        project_id: str,
        doc_type: Optional[DocumentType] = None,
        status: Optional[DocumentStatus] = None,
    ) -> List[RevenueDocument]: ...

    @abstractmethod
    def list_by_projects(
        self,
        project_ids: Iterable[str],
        doc_type: Optional[DocumentType] = None,
        status: Optional[DocumentStatus] = None,
    ) -> List[RevenueDocument]: ...


class ServiceCatalogRepository(ABC):
    @abstractmethod
    def add_service_module(self, module: ServiceModule) -> None: ...

    @abstractmethod
    def add_seniority_level(self, level: SeniorityLevel) -> None: ...

    @abstractmethod
    def add_pricing(self, pricing: ServicePricing) -> None: ...

    @abstractmethod
    def get_service_module(self, module_id: str) -> Optional[ServiceModule]: ...

    @abstractmethod
    def list_service_modules(self, active_only: bool = True) -> List[ServiceModule]: ...

    @abstractmethod
    def get_seniority_level(self, level_id: str) -> Optional[SeniorityLevel]: ...

    @abstractmethod
    def get_active_pricing(
        self,
        service_module_id: str,
        seniority_level_id: str,
    ) -> Optional[ServicePricing]: ...


__all__ = [
    "ProjectRepository",
    "PersonRepository",
    "TaskRepository",
    "TimeEntryRepository",
    "CostRepository",
    "RevenueDocumentRepository",
    "ServiceCatalogRepository",
]
