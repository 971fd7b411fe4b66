import pytest

from core.exceptions import NotFoundError
from core.models import VarianceStatus


def _service_task(seed, project, **extra):
    module = seed.service()
    return seed.task(project.id, "Key visual", service_module_id=module.id, **extra)


def test_task_variance_example_over_budget(services, seed):
    fs = services["finance_service"]
    project = seed.project()
    person = seed.person(rate=80.0)
    task = _service_task(seed, project, estimated_hours=10.0, estimated_rate=80.0)

    seed.entry(project.id, person.id, 7 * 60, task_id=task.id)
    seed.entry(project.id, person.id, 5 * 60, task_id=task.id)

    variance = fs.calculate_task_variance(task.id)

    assert variance.task_id == task.id
    assert variance.task_title == "Key visual"
    assert variance.planned_value == pytest.approx(800.0)
    assert variance.actual_hours == pytest.approx(12.0)
    assert variance.actual_value == pytest.approx(960.0)
    assert variance.actual_rates == [80.0]
    assert variance.hours_variance == pytest.approx(2.0)
    assert variance.hours_variance_percent == pytest.approx(20.0)
    assert variance.value_variance == pytest.approx(160.0)
    assert variance.value_variance_percent == pytest.approx(20.0)
    assert variance.status == VarianceStatus.OVER_BUDGET


@pytest.mark.parametrize(
    "estimates",
    [
        {},
        {"estimated_hours": 10.0},
        {"estimated_rate": 80.0},
    ],
)
def test_task_without_full_estimate_is_not_applicable(services, seed, estimates):
    project = seed.project()
    task = _service_task(seed, project, **estimates)

    assert services["finance_service"].calculate_task_variance(task.id) is None


def test_zero_estimate_is_a_result_not_null(services, seed):
    fs = services["finance_service"]
    project = seed.project()
    person = seed.person(rate=40.0)
    task = _service_task(seed, project, estimated_hours=0.0, estimated_rate=0.0)
    seed.entry(project.id, person.id, 60, task_id=task.id)

    variance = fs.calculate_task_variance(task.id)

    assert variance is not None
    assert variance.planned_value == 0.0
    assert variance.actual_value == pytest.approx(40.0)
    # no positive base, so both percentages are pinned to zero
    assert variance.hours_variance_percent == 0.0
    assert variance.value_variance_percent == 0.0
    assert variance.status == VarianceStatus.ON_BUDGET


def test_estimated_task_without_time_is_under_budget(services, seed):
    project = seed.project()
    task = _service_task(seed, project, estimated_hours=5.0, estimated_rate=100.0)

    variance = services["finance_service"].calculate_task_variance(task.id)

    assert variance.actual_hours == 0.0
    assert variance.actual_rates == []
    assert variance.value_variance_percent == pytest.approx(-100.0)
    assert variance.status == VarianceStatus.UNDER_BUDGET


def test_non_billable_time_counts_toward_task_actuals(services, seed):
    fs = services["finance_service"]
    project = seed.project()
    person = seed.person(rate=50.0)
    task = _service_task(seed, project, estimated_hours=4.0, estimated_rate=50.0)

    seed.entry(project.id, person.id, 120, task_id=task.id)
    seed.entry(project.id, person.id, 120, task_id=task.id, billable=False)

    variance = fs.calculate_task_variance(task.id)
    # project time value only sees the billable half
    time_value = fs.calculate_time_value(project.id)

    assert variance.actual_hours == pytest.approx(4.0)
    assert variance.actual_value == pytest.approx(200.0)
    assert time_value.billable_hours == pytest.approx(2.0)
    assert time_value.billable_value == pytest.approx(100.0)


def test_running_entries_are_ignored(services, seed):
    project = seed.project()
    person = seed.person(rate=50.0)
    task = _service_task(seed, project, estimated_hours=2.0, estimated_rate=50.0)
    seed.entry(project.id, person.id, 60, task_id=task.id)
    seed.entry(project.id, person.id, 0, task_id=task.id, completed=False)

    variance = services["finance_service"].calculate_task_variance(task.id)

    assert variance.actual_hours == pytest.approx(1.0)


def test_distinct_rates_listed_once_in_first_seen_order(services, seed):
    project = seed.project()
    junior = seed.person("Jo", rate=40.0)
    senior = seed.person("Kim", rate=95.0)
    intern = seed.person("Lu", rate=0.0)
    task = _service_task(seed, project, estimated_hours=6.0, estimated_rate=60.0)

    seed.entry(project.id, junior.id, 60, task_id=task.id)
    seed.entry(project.id, senior.id, 60, task_id=task.id)
    seed.entry(project.id, junior.id, 60, task_id=task.id)
    seed.entry(project.id, intern.id, 60, task_id=task.id)

    variance = services["finance_service"].calculate_task_variance(task.id)

    assert variance.actual_rates == [40.0, 95.0]
    assert variance.actual_hours == pytest.approx(4.0)
    assert variance.actual_value == pytest.approx(40.0 + 95.0 + 40.0)


def test_unknown_task_raises_not_found(services):
    with pytest.raises(NotFoundError) as exc:
        services["finance_service"].calculate_task_variance("missing-task")

    assert exc.value.code == "TASK_NOT_FOUND"


def test_project_task_variances_skip_unestimated_tasks(services, seed):
    fs = services["finance_service"]
    project = seed.project()
    estimated = _service_task(seed, project, estimated_hours=3.0, estimated_rate=100.0)
    _service_task(seed, project)
    seed.task(project.id, "Admin", estimated_hours=1.0, estimated_rate=10.0)

    variances = fs.calculate_project_task_variances(project.id)

    assert [v.task_id for v in variances] == [estimated.id]


def test_project_task_variances_isolate_failing_task(services, seed, monkeypatch, caplog):
    fs = services["finance_service"]
    project = seed.project()
    healthy = _service_task(seed, project, estimated_hours=3.0, estimated_rate=100.0)
    broken = _service_task(seed, project, estimated_hours=2.0, estimated_rate=100.0)

    original = fs.calculate_task_actuals

    def _flaky(task_id):
        if task_id == broken.id:
            raise RuntimeError("time entries unavailable")
        return original(task_id)

    monkeypatch.setattr(fs, "calculate_task_actuals", _flaky)

    with caplog.at_level("ERROR"):
        variances = fs.calculate_project_task_variances(project.id)

    assert [v.task_id for v in variances] == [healthy.id]
    assert broken.id in caplog.text
