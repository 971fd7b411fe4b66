import pytest

from core.models import DocumentStatus, DocumentType, ServiceCategory, Task
from core.services.finance.profitability import planned_value_shares


def _approved_quote(services, project_id, net):
    return services["document_service"].create_document(
        project_id,
        DocumentType.QUOTE,
        total_net=net,
        status=DocumentStatus.APPROVED,
    )


def test_profitability_per_service_module(services, seed):
    fs = services["finance_service"]
    alice = seed.person("Alice", rate=100.0, internal_cost_per_hour=40.0)
    bob = seed.person("Bob", rate=80.0, internal_cost_per_hour=30.0)
    design = seed.service("Brand Design", ServiceCategory.CREATION)
    video = seed.service("Video Production", ServiceCategory.PRODUCTION)
    seed.service("Strategy", ServiceCategory.CONSULTING)
    seed.service("Archive", ServiceCategory.LOGISTICS, is_active=False)

    campaign = seed.project("Campaign")
    logo = seed.task(campaign.id, "Logo", service_module_id=design.id, estimated_hours=10.0, estimated_rate=100.0)
    shoot = seed.task(campaign.id, "Shoot", service_module_id=video.id, estimated_hours=30.0, estimated_rate=100.0)
    _approved_quote(services, campaign.id, 8_000.0)
    services["document_service"].create_document(campaign.id, DocumentType.QUOTE, total_net=5_000.0)

    retainer = seed.project("Retainer")
    tweak = seed.task(retainer.id, "Tweak", service_module_id=design.id)
    _approved_quote(services, retainer.id, 1_000.0)

    seed.entry(campaign.id, alice.id, 5 * 60, task_id=logo.id)
    seed.entry(retainer.id, bob.id, 2 * 60, task_id=tweak.id, billable=False)
    seed.entry(campaign.id, alice.id, 10 * 60, task_id=shoot.id)
    seed.entry(campaign.id, alice.id, 60, task_id=shoot.id, completed=False)

    stats = fs.get_service_profitability()

    assert [stat.service_name for stat in stats] == ["Video Production", "Brand Design", "Strategy"]
    video_stat, design_stat, strategy_stat = stats

    # campaign revenue split 3000:1000 by planned value; the retainer has none to split by
    assert video_stat.revenue == pytest.approx(6_000.0)
    assert video_stat.cost == pytest.approx(400.0)
    assert video_stat.profit == pytest.approx(5_600.0)
    assert video_stat.margin_percentage == pytest.approx(5_600.0 / 6_000.0 * 100.0)
    assert video_stat.hours_tracked == pytest.approx(10.0)
    assert video_stat.task_count == 1
    assert video_stat.category == ServiceCategory.PRODUCTION

    assert design_stat.revenue == pytest.approx(2_000.0)
    assert design_stat.cost == pytest.approx(5 * 40.0 + 2 * 30.0)
    assert design_stat.profit == pytest.approx(1_740.0)
    assert design_stat.hours_tracked == pytest.approx(7.0)
    assert design_stat.task_count == 2

    assert strategy_stat.revenue == 0.0
    assert strategy_stat.cost == 0.0
    assert strategy_stat.margin_percentage == 0.0
    assert strategy_stat.task_count == 0


def test_cost_without_revenue_reports_zero_margin(services, seed):
    fs = services["finance_service"]
    person = seed.person(internal_cost_per_hour=50.0)
    design = seed.service("Brand Design")
    project = seed.project()
    task = seed.task(project.id, "Logo", service_module_id=design.id, estimated_hours=4.0, estimated_rate=90.0)
    seed.entry(project.id, person.id, 3 * 60, task_id=task.id)

    [stat] = fs.get_service_profitability()

    assert stat.revenue == 0.0
    assert stat.cost == pytest.approx(150.0)
    assert stat.profit == pytest.approx(-150.0)
    assert stat.margin_percentage == 0.0


def test_no_active_service_modules_gives_empty_report(services, seed):
    seed.service("Archive", is_active=False)

    assert services["finance_service"].get_service_profitability() == []


def test_planned_value_shares_skip_unestimated_and_unplanned_projects():
    tasks = [
        Task.create("p-split", "A", service_module_id="svc-a", estimated_hours=2.0, estimated_rate=50.0),
        Task.create("p-split", "B", service_module_id="svc-b", estimated_hours=3.0, estimated_rate=100.0),
        Task.create("p-split", "C", service_module_id="svc-b"),
        Task.create("p-idle", "D", service_module_id="svc-a", estimated_hours=0.0, estimated_rate=80.0),
    ]

    shares = planned_value_shares(tasks)

    assert set(shares) == {"p-split"}
    assert shares["p-split"]["svc-a"] == pytest.approx(0.25)
    assert shares["p-split"]["svc-b"] == pytest.approx(0.75)
