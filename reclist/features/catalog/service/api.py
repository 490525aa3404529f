# File: reclist/features/catalog/service/api.py
from pathlib import Path
from typing import Optional, Union
from ..data.repository import SqlRecordingRepo
from ..domain.interfaces import IRecordingRepository
from ..domain.models import FileQuery, IndexRequest, IndexSummary, QueryResult
from .indexer import RecordingIndexer

class CatalogService:
    """
    Facade for the Catalog Feature.
    Orchestrates indexing and lookups against one repository.
    """
    def __init__(self, repo: Optional[IRecordingRepository] = None):
        self.repo = repo or SqlRecordingRepo()
        self.indexer = RecordingIndexer(self.repo)

    def index_recordings(self, root: Union[str, Path], batch_size: Optional[int] = None) -> IndexSummary:
        if batch_size is None:
            request = IndexRequest(root_path=Path(root))
        else:
            request = IndexRequest(root_path=Path(root), batch_size=batch_size)
        return self.indexer.index_folder(request)

    def query_recordings(self, query: FileQuery) -> QueryResult:
        return self.repo.query_files(query)

    def count_recordings(self) -> int:
        return self.repo.count_files()
