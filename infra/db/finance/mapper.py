from __future__ import annotations

from core.models import Cost, RevenueDocument
from infra.db.models import CostORM, FinancialDocumentORM


def cost_to_orm(cost: Cost) -> CostORM:
    return CostORM(
        id=cost.id,
        project_id=cost.project_id,
        title=cost.title,
        amount=cost.amount,
        category=cost.category,
        is_estimated=cost.is_estimated,
    )


def cost_from_orm(obj: CostORM) -> Cost:
    return Cost(
        id=obj.id,
        project_id=obj.project_id,
        title=obj.title,
        amount=float(obj.amount or 0.0),
        category=obj.category,
        is_estimated=bool(obj.is_estimated),
    )


def document_to_orm(document: RevenueDocument) -> FinancialDocumentORM:
    return FinancialDocumentORM(
        id=document.id,
        project_id=document.project_id,
        doc_type=document.doc_type,
        status=document.status,
        document_number=document.document_number,
        date_issued=document.date_issued,
        due_date=document.due_date,
        total_net=document.total_net,
        vat_percent=document.vat_percent,
        total_gross=document.total_gross,
    )


def document_from_orm(obj: FinancialDocumentORM) -> RevenueDocument:
    return RevenueDocument(
        id=obj.id,
        project_id=obj.project_id,
        doc_type=obj.doc_type,
        status=obj.status,
        document_number=obj.document_number,
        date_issued=obj.date_issued,
        due_date=obj.due_date,
        total_net=float(obj.total_net or 0.0),
        vat_percent=float(obj.vat_percent or 0.0),
        total_gross=float(obj.total_gross or 0.0),
    )


__all__ = ["cost_to_orm", "cost_from_orm", "document_to_orm", "document_from_orm"]
