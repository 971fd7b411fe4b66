from datetime import datetime

import pytest

from core.models import TimeEntry
from core.services.finance import CurrentProfileRateResolver, RateResolver
from core.services.finance.aggregation import (
    accumulate_tracked_actuals,
    accumulate_tracked_actuals_by_task,
    sum_billable_time_value,
)

START = datetime(2026, 5, 4, 8, 0)


def _entry(person_id, minutes, *, task_id=None, billable=True, completed=True):
    return TimeEntry.create(
        project_id="p-1",
        person_id=person_id,
        task_id=task_id,
        start_time=START,
        end_time=START if completed else None,
        duration_minutes=minutes,
        billable=billable,
    )


class _IntervalRateResolver(RateResolver):
    """Rate depends on when the work started; stands in for a historized rate source."""

    def billable_rate(self, person_id, started_at=None, ended_at=None):
        return 100.0 if started_at and started_at.year >= 2026 else 70.0

    def internal_cost_rate(self, person_id, started_at=None, ended_at=None):
        return 40.0


def test_profile_resolver_reads_current_rate_and_defaults_unknown_people(services, seed):
    person = seed.person(rate=65.0)
    resolver = CurrentProfileRateResolver(services["person_repo"])
    known = _entry(person.id, 60)
    stranger = _entry("nobody", 60)

    rates = resolver.resolve_billable_rates([known, stranger])

    assert rates == {known.id: 65.0, stranger.id: 0.0}
    assert resolver.billable_rate(person.id) == 65.0
    assert resolver.resolve_billable_rates([]) == {}


def test_alternative_resolver_plugs_into_aggregation():
    entries = [_entry("a", 60), _entry("b", 30)]

    totals = sum_billable_time_value(entries, _IntervalRateResolver().resolve_billable_rates(entries))

    assert totals.billable_value == pytest.approx(150.0)


def test_billable_value_and_tracked_actuals_differ_on_non_billable_time():
    entries = [
        _entry("a", 60),
        _entry("a", 60, billable=False),
        _entry("a", 60, completed=False),
    ]
    rates = {entry.id: 50.0 for entry in entries}

    billable = sum_billable_time_value(entries, rates)
    tracked = accumulate_tracked_actuals(entries, rates)

    assert billable.billable_hours == pytest.approx(1.0)
    assert billable.billable_value == pytest.approx(50.0)
    assert tracked.hours == pytest.approx(2.0)
    assert tracked.value == pytest.approx(100.0)
    assert tracked.rates == (50.0,)


def test_tracked_actuals_split_by_task():
    entries = [
        _entry("a", 120, task_id="t-1"),
        _entry("a", 60, task_id="t-2"),
        _entry("a", 60),
    ]
    rates = {entry.id: 10.0 for entry in entries}

    by_task = accumulate_tracked_actuals_by_task(entries, rates)

    assert set(by_task) == {"t-1", "t-2"}
    assert by_task["t-1"].hours == pytest.approx(2.0)
    assert by_task["t-2"].value == pytest.approx(10.0)


def test_profile_resolver_reads_internal_cost_rate(services, seed):
    person = seed.person(rate=90.0, internal_cost_per_hour=35.0)
    resolver = CurrentProfileRateResolver(services["person_repo"])
    known = _entry(person.id, 60)
    stranger = _entry("nobody", 60)

    assert resolver.resolve_internal_cost_rates([known, stranger]) == {known.id: 35.0, stranger.id: 0.0}
    assert resolver.internal_cost_rate(person.id) == 35.0
    assert resolver.internal_cost_rate("nobody") == 0.0
    assert resolver.resolve_internal_cost_rates([]) == {}
