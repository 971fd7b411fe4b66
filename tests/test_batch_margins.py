import threading

import pytest
from sqlalchemy.exc import OperationalError

from core.models import DocumentStatus, DocumentType, MarginStatus
from core.services.finance import BatchMarginRunner
from core.services.finance.models import CostBreakdown, ProjectMargin
from core.services.finance.policy import MARGIN_BATCH_SIZE_ENV
from infra.db.repositories import SqlAlchemyCostRepository


def _margin(project_id, profit=10.0, pct=50.0, status=MarginStatus.EXCELLENT):
    return ProjectMargin(
        project_id=project_id,
        revenue=20.0,
        costs=CostBreakdown(direct=10.0, time_value=0.0, total=10.0),
        profit=profit,
        margin_percentage=pct,
        status=status,
    )


def test_failures_are_isolated_across_groups(caplog):
    def _calculate(project_id):
        if project_id in {"p2", "p5"}:
            raise RuntimeError(f"query failed for {project_id}")
        return _margin(project_id)

    runner = BatchMarginRunner(_calculate, batch_size=2)

    with caplog.at_level("ERROR"):
        results = runner.run(["p1", "p2", "p3", "p4", "p5"])

    assert list(results) == ["p1", "p2", "p3", "p4", "p5"]
    for pid in ("p1", "p3", "p4"):
        assert results[pid].status == MarginStatus.EXCELLENT
        assert results[pid].profit == 10.0
    for pid in ("p2", "p5"):
        assert results[pid].status == MarginStatus.UNKNOWN
        assert results[pid].profit == 0.0
        assert results[pid].margin_percentage == 0.0
    assert "p2" in caplog.text and "p5" in caplog.text


def test_groups_run_one_after_another():
    lock = threading.Lock()
    active = 0
    peak = 0
    gate = threading.Barrier(3, timeout=5)

    def _calculate(project_id):
        nonlocal active, peak
        with lock:
            active += 1
            peak = max(peak, active)
        try:
            # all three members of a group must be in flight together
            gate.wait()
            return _margin(project_id)
        finally:
            with lock:
                active -= 1

    runner = BatchMarginRunner(_calculate, batch_size=3)
    results = runner.run([f"p{i}" for i in range(9)])

    assert len(results) == 9
    assert all(summary.status == MarginStatus.EXCELLENT for summary in results.values())
    assert peak == 3


def test_duplicate_ids_are_calculated_once():
    calls = []

    def _calculate(project_id):
        calls.append(project_id)
        return _margin(project_id)

    results = BatchMarginRunner(_calculate, batch_size=10).run(["a", "b", "a"])

    assert sorted(calls) == ["a", "b"]
    assert list(results) == ["a", "b"]


def test_empty_batch_returns_empty_map():
    assert BatchMarginRunner(_margin).run([]) == {}


def test_batch_size_must_be_positive():
    with pytest.raises(ValueError):
        BatchMarginRunner(_margin, batch_size=0)


def test_batch_size_follows_environment(monkeypatch):
    monkeypatch.setenv(MARGIN_BATCH_SIZE_ENV, "4")

    assert BatchMarginRunner(_margin).batch_size == 4


def test_database_batch_isolates_broken_project(services, seed, monkeypatch):
    monkeypatch.setenv(MARGIN_BATCH_SIZE_ENV, "2")
    fs = services["finance_service"]
    ds = services["document_service"]

    projects = [seed.project(f"Project {i}") for i in range(5)]
    for project in projects:
        ds.create_document(
            project.id,
            DocumentType.QUOTE,
            total_net=1_000.0,
            status=DocumentStatus.APPROVED,
        )
        seed.cost(project.id, 500.0)
    broken = projects[3]

    original = SqlAlchemyCostRepository.list_by_project

    def _list_by_project(repo, project_id):
        if project_id == broken.id:
            raise OperationalError("SELECT", {}, Exception("connection reset"))
        return original(repo, project_id)

    monkeypatch.setattr(SqlAlchemyCostRepository, "list_by_project", _list_by_project)

    results = fs.calculate_margins_batch([p.id for p in projects])

    assert results[broken.id].status == MarginStatus.UNKNOWN
    for project in projects:
        if project.id == broken.id:
            continue
        summary = results[project.id]
        assert summary.profit == pytest.approx(500.0)
        assert summary.margin_percentage == pytest.approx(50.0)
        assert summary.status == MarginStatus.EXCELLENT
