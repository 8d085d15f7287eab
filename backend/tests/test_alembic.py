from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from form_creator.core.config import settings
from form_creator.core.database import Base

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


@pytest.fixture
def migrated_url(monkeypatch, tmp_path):
    url = f"sqlite:///{tmp_path / 'schema.db'}"
    monkeypatch.setattr(settings, "DATABASE_URL", url)
    return url


@pytest.fixture
def alembic_config():
    # No ini file, so env.py leaves the logging setup alone
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    return cfg


def _inspect(url):
    engine = create_engine(url)
    try:
        inspector = inspect(engine)
        tables = {
            name: {
                "columns": {col["name"] for col in inspector.get_columns(name)},
                "indexes": {idx["name"] for idx in inspector.get_indexes(name)},
            }
            for name in inspector.get_table_names()
        }
    finally:
        engine.dispose()
    return tables


def test_upgrade_matches_models(migrated_url, alembic_config):
    command.upgrade(alembic_config, "head")

    tables = _inspect(migrated_url)
    for name, table in Base.metadata.tables.items():
        assert name in tables
        assert tables[name]["columns"] == {col.name for col in table.columns}
        assert tables[name]["indexes"] == {idx.name for idx in table.indexes}


def test_downgrade_drops_tables(migrated_url, alembic_config):
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")

    assert set(_inspect(migrated_url)) == {"alembic_version"}
