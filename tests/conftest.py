# File: tests/conftest.py

import pytest
import os
import sys
from sqlalchemy import text

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Point the catalogue at a throwaway SQLite file before settings load
os.environ.setdefault("RECLIST_DATABASE_URL", "sqlite:///./test_reclist.db")

from reclist.core.database.base import Base
from reclist.core.database.connection import engine, SessionLocal, init_db


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Creates every table the catalogue needs.
    """
    init_db(engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def clean_db(global_setup):
    """
    Runs before EVERY test.
    Empties all tables so tests never see each other's rows.
    """
    with engine.connect() as conn:
        trans = conn.begin()
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(text(f'DELETE FROM "{table.name}";'))
        trans.commit()

    yield


@pytest.fixture(scope="function")
def db_session():
    """
    Provides a session for the test to use.
    """
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def recordings_root(tmp_path):
    """
    Builds a day-per-folder recordings tree:
    - 9_3_2025: two recordings, one note, one upper-case extension
    - 9_4_2025: one recording
    - loose.wav directly under the root (never listed)
    """
    root = tmp_path / "recordings"
    root.mkdir()

    day1 = root / "9_3_2025"
    day1.mkdir()
    (day1 / "5551234567 by alice@example.com @ 3_45_12 PM_61000.wav").write_bytes(b"RIFF" + b"\0" * 60)
    (day1 / "5559876543 by bob@example.com @ 9_05_00 AM_15000.wav").write_bytes(b"RIFF" + b"\0" * 20)
    (day1 / "notes.txt").write_text("not audio")
    (day1 / "shout.WAV").write_bytes(b"RIFF")

    day2 = root / "9_4_2025"
    day2.mkdir()
    (day2 / "5551234567 by alice@example.com @ 11_30_45 AM_120000.wav").write_bytes(b"RIFF")

    (root / "loose.wav").write_bytes(b"RIFF")
    return root
