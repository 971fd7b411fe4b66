from infra.db.catalog.repository import SqlAlchemyServiceCatalogRepository

__all__ = ["SqlAlchemyServiceCatalogRepository"]
