from abc import ABC, abstractmethod
from typing import Iterable
from .models import RecordingMetadata, FileQuery, QueryResult

class IRecordingRepository(ABC):
    @abstractmethod
    def upsert_files(self, records: Iterable[RecordingMetadata]) -> int:
        """
        Inserts or updates (by file_path) every record in one transaction.
        Returns the number of records written.
        """
        pass

    @abstractmethod
    def query_files(self, query: FileQuery) -> QueryResult:
        """Returns one page of matching records plus the total match count."""
        pass

    @abstractmethod
    def count_files(self) -> int:
        """Total number of catalogued recordings."""
        pass
