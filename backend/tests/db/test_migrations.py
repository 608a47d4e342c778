# backend/tests/db/test_migrations.py
import os

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ALEMBIC_INI = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', 'alembic.ini'))


def _config(db_url):
    config = Config(ALEMBIC_INI)
    config.set_main_option("sqlalchemy.url", db_url)
    config.attributes["configure_logger"] = False
    return config


def test_upgrade_creates_tables(tmp_path):
    db_url = f"sqlite:///{tmp_path}/migrated.db"
    command.upgrade(_config(db_url), "head")

    inspector = inspect(create_engine(db_url))
    assert {"diary", "date_weather", "memo"} <= set(inspector.get_table_names())
    assert {c["name"] for c in inspector.get_columns("diary")} == {
        "id", "date", "weather", "icon", "temperature", "text", "created_at",
    }
    assert "ix_diary_date" in {i["name"] for i in inspector.get_indexes("diary")}


def test_downgrade_drops_tables(tmp_path):
    db_url = f"sqlite:///{tmp_path}/migrated.db"
    config = _config(db_url)
    command.upgrade(config, "head")
    command.downgrade(config, "base")

    tables = set(inspect(create_engine(db_url)).get_table_names())
    assert not {"diary", "date_weather", "memo"} & tables
