from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from reclist.core.common.enums import SortColumn, SortDirection
from reclist.core.config.settings import settings

@dataclass
class RecordingMetadata:
    """
    Call details recovered from a "<M_D_YYYY>/<name>.wav" listing line.
    """
    file_path: str
    phone: str
    email: str
    call_date: str   # YYYY-MM-DD
    call_time: str   # HH:MM:SS (24h) or ""
    duration_ms: int
    file_size: int = 0

@dataclass(frozen=True)
class IndexRequest:
    """
    User intent to index the recordings below a root folder.
    """
    root_path: Path
    batch_size: int = settings.INDEX_BATCH_SIZE

    def __post_init__(self):
        if self.batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")

@dataclass
class IndexSummary:
    """
    Report returned after indexing completes.
    """
    files_found: int = 0
    files_indexed: int = 0
    files_skipped: int = 0
    errors: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class FileQuery:
    """
    Filters, ordering and paging for catalogue lookups.
    All filters are optional; None means "no constraint".
    """
    date_start: Optional[str] = None
    date_end: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    duration_min: Optional[float] = None  # seconds
    time_start: Optional[str] = None
    time_end: Optional[str] = None
    sort_column: SortColumn = SortColumn.DATE
    sort_direction: SortDirection = SortDirection.DESC
    limit: int = 25
    offset: int = 0

    def __post_init__(self):
        if self.limit <= 0:
            raise ValueError(f"limit must be positive, got {self.limit}")
        if self.offset < 0:
            raise ValueError(f"offset must not be negative, got {self.offset}")

@dataclass
class QueryResult:
    files: List[RecordingMetadata]
    total_count: int
    has_more: bool
