# tests/conftest.py
from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.models import (
    Cost,
    Person,
    Project,
    SeniorityLevel,
    ServiceCategory,
    ServiceModule,
    ServicePricing,
    Task,
    TimeEntry,
)
from infra.db.base import Base
from infra.db.repositories import (
    SqlAlchemyCostRepository,
    SqlAlchemyPersonRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyRevenueDocumentRepository,
    SqlAlchemyServiceCatalogRepository,
    SqlAlchemyTaskRepository,
    SqlAlchemyTimeEntryRepository,
)
from infra.services import build_service_graph

ENTRY_START = datetime(2026, 3, 2, 9, 0)


@pytest.fixture
def engine(tmp_path):
    # file-backed so batch worker threads see committed rows through their own sessions
    db_path = tmp_path / "finance.db"
    engine = create_engine(
        f"sqlite:///{db_path.as_posix()}",
        future=True,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine):
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    graph = build_service_graph(session)
    try:
        yield {
            **graph.as_dict(),
            "project_repo": SqlAlchemyProjectRepository(session),
            "person_repo": SqlAlchemyPersonRepository(session),
            "document_repo": SqlAlchemyRevenueDocumentRepository(session),
        }
    finally:
        # domain_events is process-global
        graph.close()


class Seeder:
    """Writes consumed records straight through the repositories and commits each one."""

    def __init__(self, session):
        self.session = session
        self.projects = SqlAlchemyProjectRepository(session)
        self.people = SqlAlchemyPersonRepository(session)
        self.tasks = SqlAlchemyTaskRepository(session)
        self.entries = SqlAlchemyTimeEntryRepository(session)
        self.costs = SqlAlchemyCostRepository(session)
        self.catalog = SqlAlchemyServiceCatalogRepository(session)
        self._entry_count = 0

    def _commit(self, obj):
        self.session.commit()
        return obj

    def project(self, title="Client Campaign", **extra) -> Project:
        project = Project.create(title, **extra)
        self.projects.add(project)
        return self._commit(project)

    def person(self, full_name="Alex Doe", rate=50.0, **extra) -> Person:
        person = Person.create(full_name, billable_hourly_rate=rate, **extra)
        self.people.add(person)
        return self._commit(person)

    def service(self, name="Brand Design", category=ServiceCategory.CREATION, **extra) -> ServiceModule:
        module = ServiceModule.create(category, name, **extra)
        self.catalog.add_service_module(module)
        return self._commit(module)

    def seniority(self, level_name="Senior", level_order=3) -> SeniorityLevel:
        level = SeniorityLevel.create(level_name, level_order)
        self.catalog.add_seniority_level(level)
        return self._commit(level)

    def pricing(self, module_id, level_id, rate, **extra) -> ServicePricing:
        pricing = ServicePricing.create(module_id, level_id, rate, **extra)
        self.catalog.add_pricing(pricing)
        return self._commit(pricing)

    def task(self, project_id, title="Task", **extra) -> Task:
        task = Task.create(project_id, title, **extra)
        self.tasks.add(task)
        return self._commit(task)

    def entry(
        self,
        project_id,
        person_id,
        minutes,
        *,
        task_id=None,
        billable=True,
        completed=True,
    ) -> TimeEntry:
        # one entry per day so start_time order is insertion order
        start = ENTRY_START + timedelta(days=self._entry_count)
        self._entry_count += 1
        entry = TimeEntry.create(
            project_id=project_id,
            person_id=person_id,
            task_id=task_id,
            start_time=start,
            end_time=start + timedelta(minutes=minutes) if completed else None,
            duration_minutes=minutes if completed else None,
            billable=billable,
        )
        self.entries.add(entry)
        return self._commit(entry)

    def cost(self, project_id, amount, title="Stock footage", **extra) -> Cost:
        cost = Cost.create(project_id, title, amount, **extra)
        self.costs.add(cost)
        return self._commit(cost)


@pytest.fixture
def seed(session):
    return Seeder(session)
