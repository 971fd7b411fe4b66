from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

logger = logging.getLogger(__name__)

# infra/migrate.py -> infra -> project root
_MIGRATION_DIR = Path(__file__).resolve().parents[1] / "migration"


def alembic_config(db_url: str, script_location: Path | None = None) -> Config:
    location = Path(script_location) if script_location is not None else _MIGRATION_DIR
    if not location.exists():
        raise RuntimeError(f"Alembic script_location missing: {location}")

    cfg = Config()
    cfg.set_main_option("script_location", str(location))
    cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg


def run_migrations(db_url: str, revision: str = "head") -> None:
    logger.info("Upgrading schema at %s to %s", db_url, revision)
    command.upgrade(alembic_config(db_url), revision)


__all__ = ["alembic_config", "run_migrations"]
