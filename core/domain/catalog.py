from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import ServiceCategory
from core.domain.identifiers import generate_id


@dataclass
class ServiceModule:
    id: str
    category: ServiceCategory
    name: str
    description: str = ""
    default_unit: str = "hour"
    is_active: bool = True

    @staticmethod
    def create(category: ServiceCategory, name: str, **extra) -> "ServiceModule":
        return ServiceModule(id=generate_id(), category=category, name=name, **extra)


@dataclass
class SeniorityLevel:
    id: str
    level_name: str
    level_order: int
    description: str = ""
    is_active: bool = True

    @staticmethod
    def create(level_name: str, level_order: int, **extra) -> "SeniorityLevel":
        return SeniorityLevel(
            id=generate_id(),
            level_name=level_name,
            level_order=level_order,
            **extra,
        )


@dataclass
class ServicePricing:
    id: str
    service_module_id: str
    seniority_level_id: str
    rate: float
    internal_cost: float = 0.0
    valid_from: Optional[date] = None
    valid_until: Optional[date] = None
    is_active: bool = True

    @property
    def margin_percentage(self) -> float:
        if self.rate > 0:
            return (self.rate - self.internal_cost) / self.rate * 100.0
        return 0.0

    @staticmethod
    def create(
        service_module_id: str,
        seniority_level_id: str,
        rate: float,
        internal_cost: float = 0.0,
        valid_from: Optional[date] = None,
        valid_until: Optional[date] = None,
        is_active: bool = True,
    ) -> "ServicePricing":
        return ServicePricing(
            id=generate_id(),
            service_module_id=service_module_id,
            seniority_level_id=seniority_level_id,
            rate=rate,
            internal_cost=internal_cost,
            valid_from=valid_from,
            valid_until=valid_until,
            is_active=is_active,
        )


__all__ = ["ServiceModule", "SeniorityLevel", "ServicePricing"]
