from __future__ import annotations

import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import ProjectRepository, RevenueDocumentRepository
from core.models import DEFAULT_VAT_PERCENT, DocumentStatus, DocumentType, RevenueDocument
from core.services.documents.validation import DocumentValidationMixin, gross_amount

logger = logging.getLogger(__name__)

_UNSET = object()


class RevenueDocumentService(DocumentValidationMixin):
    """
    Quotes, invoices and credit notes attached to projects.

    Every committed change announces the affected project ids on
    domain_events.revenue_documents_changed; budget sync listens there.
    """

    def __init__(
        self,
        session: Session,
        document_repo: RevenueDocumentRepository,
        project_repo: ProjectRepository,
    ):
        self._session: Session = session
        self._document_repo: RevenueDocumentRepository = document_repo
        self._project_repo: ProjectRepository = project_repo

    def create_document(
        self,
        project_id: str | None,
        doc_type: DocumentType | str,
        total_net: float = 0.0,
        vat_percent: float = DEFAULT_VAT_PERCENT,
        status: DocumentStatus | str = DocumentStatus.DRAFT,
        document_number: str | None = None,
        date_issued: date | None = None,
        due_date: date | None = None,
    ) -> RevenueDocument:
        doc_type = self._coerce_type(doc_type)
        status = self._coerce_status(status)
        self._require_project(project_id)
        self._validate_amounts(total_net, vat_percent)

        document = RevenueDocument.create(
            project_id=project_id,
            doc_type=doc_type,
            status=status,
            document_number=(document_number or "").strip() or None,
            date_issued=date_issued,
            due_date=due_date,
            total_net=float(total_net),
            vat_percent=float(vat_percent),
            total_gross=gross_amount(total_net, vat_percent),
        )

        try:
            self._document_repo.add(document)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating %s document: %s", doc_type.value, e)
            raise

        logger.info("Created %s %s for project %s", doc_type.value, document.id, project_id)
        self._announce(project_id)
        return document

    def update_document(
        self,
        document_id: str,
        *,
        project_id=_UNSET,
        status: DocumentStatus | str | None = None,
        total_net: float | None = None,
        vat_percent: float | None = None,
        document_number=_UNSET,
        date_issued=_UNSET,
        due_date=_UNSET,
    ) -> RevenueDocument:
        document = self._document_repo.get(document_id)
        if not document:
            raise NotFoundError("Document not found.", code="DOCUMENT_NOT_FOUND")

        previous_project_id = document.project_id
        if project_id is not _UNSET:
            self._require_project(project_id)
            document.project_id = project_id
        if status is not None:
            document.status = self._coerce_status(status)
        if document_number is not _UNSET:
            document.document_number = (document_number or "").strip() or None
        if date_issued is not _UNSET:
            document.date_issued = date_issued
        if due_date is not _UNSET:
            document.due_date = due_date

        net = document.total_net if total_net is None else float(total_net)
        vat = document.vat_percent if vat_percent is None else float(vat_percent)
        self._validate_amounts(net, vat)
        document.total_net = net
        document.vat_percent = vat
        document.total_gross = gross_amount(net, vat)

        try:
            self._document_repo.update(document)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        self._announce(previous_project_id, document.project_id)
        return document

    def delete_document(self, document_id: str) -> None:
        document = self._document_repo.get(document_id)
        if not document:
            raise NotFoundError("Document not found.", code="DOCUMENT_NOT_FOUND")

        try:
            self._document_repo.delete(document_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        logger.info("Deleted document %s", document_id)
        self._announce(document.project_id)

    def list_documents(
        self,
        project_id: str,
        doc_type: DocumentType | str | None = None,
        status: DocumentStatus | str | None = None,
    ) -> List[RevenueDocument]:
        return self._document_repo.list_by_project(
            project_id,
            doc_type=None if doc_type is None else self._coerce_type(doc_type),
            status=None if status is None else self._coerce_status(status),
        )

    @staticmethod
    def _announce(*project_ids: str | None) -> None:
        for project_id in dict.fromkeys(project_ids):
            if project_id:
                domain_events.revenue_documents_changed.emit(project_id)


__all__ = ["RevenueDocumentService"]
