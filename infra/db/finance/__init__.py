from infra.db.finance.mapper import cost_from_orm, cost_to_orm, document_from_orm, document_to_orm
from infra.db.finance.repository import (
    SqlAlchemyCostRepository,
    SqlAlchemyRevenueDocumentRepository,
)

__all__ = [
    "cost_to_orm",
    "cost_from_orm",
    "document_to_orm",
    "document_from_orm",
    "SqlAlchemyCostRepository",
    "SqlAlchemyRevenueDocumentRepository",
]
