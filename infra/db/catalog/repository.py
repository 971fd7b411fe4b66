from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import ServiceCatalogRepository
from core.models import SeniorityLevel, ServiceModule, ServicePricing
from infra.db.catalog.mapper import (
    pricing_from_orm,
    pricing_to_orm,
    seniority_level_from_orm,
    seniority_level_to_orm,
    service_module_from_orm,
    service_module_to_orm,
)
from infra.db.models import SeniorityLevelORM, ServiceModuleORM, ServicePricingORM


class SqlAlchemyServiceCatalogRepository(ServiceCatalogRepository):
    def __init__(self, session: Session):
        self.session = session

    def add_service_module(self, module: ServiceModule) -> None:
        self.session.add(service_module_to_orm(module))

    def add_seniority_level(self, level: SeniorityLevel) -> None:
        self.session.add(seniority_level_to_orm(level))

    def add_pricing(self, pricing: ServicePricing) -> None:
        self.session.add(pricing_to_orm(pricing))

    def get_service_module(self, module_id: str) -> Optional[ServiceModule]:
        obj = self.session.get(ServiceModuleORM, module_id)
        return service_module_from_orm(obj) if obj else None

    def list_service_modules(self, active_only: bool = True) -> List[ServiceModule]:
        stmt = select(ServiceModuleORM)
        if active_only:
            stmt = stmt.where(ServiceModuleORM.is_active.is_(True))
        rows = self.session.execute(stmt.order_by(ServiceModuleORM.name)).scalars().all()
        return [service_module_from_orm(row) for row in rows]

    def get_seniority_level(self, level_id: str) -> Optional[SeniorityLevel]:
        obj = self.session.get(SeniorityLevelORM, level_id)
        return seniority_level_from_orm(obj) if obj else None

    def get_active_pricing(
        self,
        service_module_id: str,
        seniority_level_id: str,
    ) -> Optional[ServicePricing]:
        # Newest validity start first when several active rows exist.
        stmt = (
            select(ServicePricingORM)
            .where(
                ServicePricingORM.service_module_id == service_module_id,
                ServicePricingORM.seniority_level_id == seniority_level_id,
                ServicePricingORM.is_active.is_(True),
            )
            .order_by(ServicePricingORM.valid_from.desc())
            .limit(1)
        )
        obj = self.session.execute(stmt).scalars().first()
        return pricing_from_orm(obj) if obj else None


__all__ = ["SqlAlchemyServiceCatalogRepository"]
