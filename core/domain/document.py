from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import DocumentStatus, DocumentType
from core.domain.identifiers import generate_id

DEFAULT_VAT_PERCENT = 19.0


@dataclass
class RevenueDocument:
    id: str
    project_id: Optional[str]
    doc_type: DocumentType
    status: DocumentStatus = DocumentStatus.DRAFT
    document_number: Optional[str] = None
    date_issued: Optional[date] = None
    due_date: Optional[date] = None
    total_net: float = 0.0
    vat_percent: float = DEFAULT_VAT_PERCENT
    total_gross: float = 0.0

    @property
    def is_revenue_bearing(self) -> bool:
        return self.doc_type == DocumentType.QUOTE and self.status == DocumentStatus.APPROVED

    @staticmethod
    def create(
        project_id: Optional[str],
        doc_type: DocumentType,
        status: DocumentStatus = DocumentStatus.DRAFT,
        document_number: Optional[str] = None,
        date_issued: Optional[date] = None,
        due_date: Optional[date] = None,
        total_net: float = 0.0,
        vat_percent: float = DEFAULT_VAT_PERCENT,
        total_gross: float = 0.0,
    ) -> "RevenueDocument":
        return RevenueDocument(
            id=generate_id(),
            project_id=project_id,
            doc_type=doc_type,
            status=status,
            document_number=document_number,
            date_issued=date_issued,
            due_date=due_date,
            total_net=total_net,
            vat_percent=vat_percent,
            total_gross=total_gross,
        )


__all__ = ["RevenueDocument", "DEFAULT_VAT_PERCENT"]
