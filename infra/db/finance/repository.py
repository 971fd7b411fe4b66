from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.interfaces import CostRepository, RevenueDocumentRepository
from core.models import Cost, DocumentStatus, DocumentType, RevenueDocument
from infra.db.finance.mapper import cost_from_orm, cost_to_orm, document_from_orm, document_to_orm
from infra.db.models import CostORM, FinancialDocumentORM


class SqlAlchemyCostRepository(CostRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, cost: Cost) -> None:
        self.session.add(cost_to_orm(cost))

    def list_by_project(self, project_id: str) -> List[Cost]:
        stmt = select(CostORM).where(CostORM.project_id == project_id)
        rows = self.session.execute(stmt).scalars().all()
        return [cost_from_orm(row) for row in rows]


class SqlAlchemyRevenueDocumentRepository(RevenueDocumentRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, document: RevenueDocument) -> None:
        self.session.add(document_to_orm(document))

    def get(self, document_id: str) -> Optional[RevenueDocument]:
        obj = self.session.get(FinancialDocumentORM, document_id)
        return document_from_orm(obj) if obj else None

    def update(self, document: RevenueDocument) -> None:
        obj = self.session.get(FinancialDocumentORM, document.id)
        if not obj:
            raise NotFoundError("Document not found.", code="DOCUMENT_NOT_FOUND")
        obj.project_id = document.project_id
        obj.doc_type = document.doc_type
        obj.status = document.status
        obj.document_number = document.document_number
        obj.date_issued = document.date_issued
        obj.due_date = document.due_date
        obj.total_net = document.total_net
        obj.vat_percent = document.vat_percent
        obj.total_gross = document.total_gross

    def delete(self, document_id: str) -> None:
        self.session.execute(delete(FinancialDocumentORM).where(FinancialDocumentORM.id == document_id))

    def list_by_project(
        self,
        project_id: str,
        doc_type: Optional[DocumentType] = None,
        status: Optional[DocumentStatus] = None,
    ) -> List[RevenueDocument]:
        stmt = select(FinancialDocumentORM).where(FinancialDocumentORM.project_id == project_id)
        if doc_type is not None:
            stmt = stmt.where(FinancialDocumentORM.doc_type == doc_type)
        if status is not None:
            stmt = stmt.where(FinancialDocumentORM.status == status)
        rows = self.session.execute(stmt.order_by(FinancialDocumentORM.date_issued)).scalars().all()
        return [document_from_orm(row) for row in rows]

    def list_by_projects(
        self,
        project_ids: Iterable[str],
        doc_type: Optional[DocumentType] = None,
        status: Optional[DocumentStatus] = None,
    ) -> List[RevenueDocument]:
        ids = list(set(project_ids))
        if not ids:
            return []
        stmt = select(FinancialDocumentORM).where(FinancialDocumentORM.project_id.in_(ids))
        if doc_type is not None:
            stmt = stmt.where(FinancialDocumentORM.doc_type == doc_type)
        if status is not None:
            stmt = stmt.where(FinancialDocumentORM.status == status)
        rows = self.session.execute(stmt).scalars().all()
        return [document_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyCostRepository", "SqlAlchemyRevenueDocumentRepository"]
