from .service import RevenueDocumentService

__all__ = ["RevenueDocumentService"]
