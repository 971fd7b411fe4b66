from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence

from core.interfaces import PersonRepository
from core.models import Person, TimeEntry


class RateResolver(ABC):
    """Supplies the hourly rates applied to tracked time.

    Aggregations only ever see the rates returned here, so a resolver that
    reads historized rates can replace the default one without touching them.
    Billable rates value time towards the client; internal cost rates value
    it as agency cost.
    """

    @abstractmethod
    def billable_rate(
        self,
        person_id: str,
        started_at: datetime | None = None,
        ended_at: datetime | None = None,
    ) -> float: ...

    @abstractmethod
    def internal_cost_rate(
        self,
        person_id: str,
        started_at: datetime | None = None,
        ended_at: datetime | None = None,
    ) -> float: ...

    def resolve_billable_rates(self, entries: Sequence[TimeEntry]) -> dict[str, float]:
        """Rate per time entry id."""
        return {
            entry.id: self.billable_rate(entry.person_id, entry.start_time, entry.end_time)
            for entry in entries
        }

    def resolve_internal_cost_rates(self, entries: Sequence[TimeEntry]) -> dict[str, float]:
        return {
            entry.id: self.internal_cost_rate(entry.person_id, entry.start_time, entry.end_time)
            for entry in entries
        }


class CurrentProfileRateResolver(RateResolver):
    """Reads the person's current profile rates, ignoring the entry interval.

    A rate change therefore re-values every past entry of that person. Unknown
    people resolve to 0.
    """

    def __init__(self, person_repo: PersonRepository):
        self._person_repo: PersonRepository = person_repo

    def billable_rate(
        self,
        person_id: str,
        started_at: datetime | None = None,
        ended_at: datetime | None = None,
    ) -> float:
        person = self._person_repo.get(person_id)
        if person is None:
            return 0.0
        return float(person.billable_hourly_rate or 0.0)

    def internal_cost_rate(
        self,
        person_id: str,
        started_at: datetime | None = None,
        ended_at: datetime | None = None,
    ) -> float:
        person = self._person_repo.get(person_id)
        if person is None:
            return 0.0
        return float(person.internal_cost_per_hour or 0.0)

    def _people_for(self, entries: Sequence[TimeEntry]) -> dict[str, Person]:
        person_ids = {entry.person_id for entry in entries}
        return {person.id: person for person in self._person_repo.list_by_ids(person_ids)}

    def resolve_billable_rates(self, entries: Sequence[TimeEntry]) -> dict[str, float]:
        if not entries:
            return {}
        people = self._people_for(entries)
        rates: dict[str, float] = {}
        for entry in entries:
            person = people.get(entry.person_id)
            rates[entry.id] = float(person.billable_hourly_rate or 0.0) if person else 0.0
        return rates

    def resolve_internal_cost_rates(self, entries: Sequence[TimeEntry]) -> dict[str, float]:
        if not entries:
            return {}
        people = self._people_for(entries)
        rates: dict[str, float] = {}
        for entry in entries:
            person = people.get(entry.person_id)
            rates[entry.id] = float(person.internal_cost_per_hour or 0.0) if person else 0.0
        return rates


__all__ = ["RateResolver", "CurrentProfileRateResolver"]
