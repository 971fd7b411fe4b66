from __future__ import annotations

from core.models import SeniorityLevel, ServiceModule, ServicePricing
from infra.db.models import SeniorityLevelORM, ServiceModuleORM, ServicePricingORM


def service_module_to_orm(module: ServiceModule) -> ServiceModuleORM:
    return ServiceModuleORM(
        id=module.id,
        category=module.category,
        name=module.name,
        description=module.description,
        default_unit=module.default_unit,
        is_active=module.is_active,
    )


def service_module_from_orm(obj: ServiceModuleORM) -> ServiceModule:
    return ServiceModule(
        id=obj.id,
        category=obj.category,
        name=obj.name,
        description=obj.description or "",
        default_unit=obj.default_unit or "hour",
        is_active=bool(obj.is_active),
    )


def seniority_level_to_orm(level: SeniorityLevel) -> SeniorityLevelORM:
    return SeniorityLevelORM(
        id=level.id,
        level_name=level.level_name,
        level_order=level.level_order,
        description=level.description,
        is_active=level.is_active,
    )


def seniority_level_from_orm(obj: SeniorityLevelORM) -> SeniorityLevel:
    return SeniorityLevel(
        id=obj.id,
        level_name=obj.level_name,
        level_order=obj.level_order,
        description=obj.description or "",
        is_active=bool(obj.is_active),
    )


def pricing_to_orm(pricing: ServicePricing) -> ServicePricingORM:
    return ServicePricingORM(
        id=pricing.id,
        service_module_id=pricing.service_module_id,
        seniority_level_id=pricing.seniority_level_id,
        rate=pricing.rate,
        internal_cost=pricing.internal_cost,
        valid_from=pricing.valid_from,
        valid_until=pricing.valid_until,
        is_active=pricing.is_active,
    )


def pricing_from_orm(obj: ServicePricingORM) -> ServicePricing:
    return ServicePricing(
        id=obj.id,
        service_module_id=obj.service_module_id,
        seniority_level_id=obj.seniority_level_id,
        rate=float(obj.rate or 0.0),
        internal_cost=float(obj.internal_cost or 0.0),
        valid_from=obj.valid_from,
        valid_until=obj.valid_until,
        is_active=bool(obj.is_active),
    )


__all__ = [
    "service_module_to_orm",
    "service_module_from_orm",
    "seniority_level_to_orm",
    "seniority_level_from_orm",
    "pricing_to_orm",
    "pricing_from_orm",
]
