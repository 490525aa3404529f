# File: reclist/core/database/connection.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from reclist.core.config.settings import settings
from reclist.core.database.base import Base


def build_engine(url: str):
    # check_same_thread=False is needed only for SQLite
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args
    )


def build_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


engine = build_engine(settings.DATABASE_URL)

SessionLocal = build_session_factory(engine)


def init_db(bind=None):
    """Creates every registered table that does not exist yet."""
    # Import models so they are registered on Base.metadata
    import reclist.features.catalog.data.sql_models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    """Dependency for obtaining a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
