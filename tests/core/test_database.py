# File: tests/core/test_database.py

from sqlalchemy import inspect, text
from reclist.core.database.connection import engine, get_db


def test_database_connection():
    """
    Simple smoke test to ensure DB is reachable and configured.
    """
    db_gen = get_db()
    db = next(db_gen)
    try:
        result = db.execute(text("SELECT 1"))
        assert result.scalar() == 1
    finally:
        db.close()


def test_init_db_creates_files_table():
    assert "files" in inspect(engine).get_table_names()
