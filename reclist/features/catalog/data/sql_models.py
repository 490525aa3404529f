from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, DateTime, Index
from reclist.core.database.base import Base

def utc_now():
    return datetime.now(timezone.utc)

class RecordingFileModel(Base):
    __tablename__ = "files"

    id = Column(Integer, primary_key=True, autoincrement=True)
    file_path = Column(String, nullable=False, unique=True)
    phone = Column(String, index=True)
    email = Column(String, index=True)
    call_date = Column(String, index=True)  # YYYY-MM-DD
    call_time = Column(String, index=True)  # HH:MM:SS
    duration_ms = Column(Integer, index=True)
    file_size = Column(Integer)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    __table_args__ = (
        Index("idx_files_composite", "call_date", "phone", "email"),
    )
