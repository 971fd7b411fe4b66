# infra/db/base.py
from __future__ import annotations

import logging
import os
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.path import default_db_path

logger = logging.getLogger(__name__)

DATABASE_URL_ENV = "AF_DATABASE_URL"

Base = declarative_base()


def database_url() -> str:
    override = (os.getenv(DATABASE_URL_ENV) or "").strip()
    if override:
        return override
    return f"sqlite:///{default_db_path().as_posix()}"


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    url = database_url()
    logger.info("Using database at: %s", url)
    return create_engine(url, echo=False, future=True)


def session_factory(engine: Engine | None = None) -> sessionmaker:
    return sessionmaker(bind=engine or get_engine(), autoflush=False, autocommit=False, future=True)


__all__ = ["Base", "DATABASE_URL_ENV", "database_url", "get_engine", "session_factory"]
