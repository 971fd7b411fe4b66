from __future__ import annotations

import logging

from infra.db.base import database_url, session_factory
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.services import ServiceGraph, build_service_graph

logger = logging.getLogger(__name__)


def bootstrap(*, configure_logging: bool = True) -> ServiceGraph:
    """Logging, schema upgrade, then a service graph on a fresh session."""
    if configure_logging:
        setup_logging()
    run_migrations(database_url())
    session = session_factory()()
    logger.info("Finance engine ready")
    return build_service_graph(session)


__all__ = ["bootstrap"]
