from __future__ import annotations

from core.exceptions import NotFoundError, ValidationError
from core.interfaces import ProjectRepository
from core.models import DocumentStatus, DocumentType


class DocumentValidationMixin:
    _project_repo: ProjectRepository

    def _require_project(self, project_id: str | None) -> None:
        if project_id is None:
            return
        if not self._project_repo.get(project_id):
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

    @staticmethod
    def _validate_amounts(total_net: float, vat_percent: float) -> None:
        if total_net < 0:
            raise ValidationError("Net amount cannot be negative.", code="DOCUMENT_NET_NEGATIVE")
        if vat_percent < 0:
            raise ValidationError("VAT percentage cannot be negative.", code="DOCUMENT_VAT_NEGATIVE")

    @staticmethod
    def _coerce_type(doc_type: DocumentType | str) -> DocumentType:
        try:
            return doc_type if isinstance(doc_type, DocumentType) else DocumentType(str(doc_type))
        except ValueError as exc:
            raise ValidationError(f"Unknown document type: {doc_type}", code="DOCUMENT_TYPE_INVALID") from exc

    @staticmethod
    def _coerce_status(status: DocumentStatus | str) -> DocumentStatus:
        try:
            return status if isinstance(status, DocumentStatus) else DocumentStatus(str(status))
        except ValueError as exc:
            raise ValidationError(f"Unknown document status: {status}", code="DOCUMENT_STATUS_INVALID") from exc


def gross_amount(total_net: float, vat_percent: float) -> float:
    return round(float(total_net) * (1.0 + float(vat_percent) / 100.0), 2)


__all__ = ["DocumentValidationMixin", "gross_amount"]
