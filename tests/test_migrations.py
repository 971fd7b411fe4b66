from __future__ import annotations

from sqlalchemy import create_engine, inspect

from infra.db.base import Base
from infra.migrate import run_migrations


def test_migrations_create_every_mapped_table(tmp_path):
    db_url = f"sqlite:///{(tmp_path / 'migrated.db').as_posix()}"

    run_migrations(db_url)

    engine = create_engine(db_url, future=True)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        assert set(Base.metadata.tables) <= tables

        migrated_columns = {col["name"] for col in inspector.get_columns("tasks")}
        mapped_columns = set(Base.metadata.tables["tasks"].columns.keys())
        assert mapped_columns == migrated_columns

        indexed = {ix["name"] for ix in inspector.get_indexes("time_entries")}
        assert {"idx_time_entries_project_id", "idx_time_entries_task_id"} <= indexed
    finally:
        engine.dispose()


def test_migrations_are_repeatable(tmp_path):
    db_url = f"sqlite:///{(tmp_path / 'twice.db').as_posix()}"

    run_migrations(db_url)
    run_migrations(db_url)


def test_bootstrap_migrates_and_wires_the_engine(tmp_path, monkeypatch):
    from infra.bootstrap import bootstrap
    from infra.db.base import DATABASE_URL_ENV, get_engine

    monkeypatch.setenv(DATABASE_URL_ENV, f"sqlite:///{(tmp_path / 'boot.db').as_posix()}")
    get_engine.cache_clear()
    graph = bootstrap(configure_logging=False)
    try:
        assert set(Base.metadata.tables) <= set(inspect(get_engine()).get_table_names())
        margin = graph.finance_service.calculate_project_margin("missing-project")
        assert margin.revenue == 0.0
        assert margin.margin_percentage == 0.0
    finally:
        graph.close()
        get_engine().dispose()
        get_engine.cache_clear()
