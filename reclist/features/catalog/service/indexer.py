import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError

# Cross-Feature Import (Service calls Service)
from reclist.features.listing.service.api import list_wav_files

from ..domain.interfaces import IRecordingRepository
from ..domain.models import IndexRequest, IndexSummary, RecordingMetadata
from ..data.metadata_parser import parse_file_metadata
from ..data.repository import SqlRecordingRepo

logger = logging.getLogger(__name__)

class RecordingIndexer:
    """
    Service responsible for cataloguing the recordings below a root folder.
    """

    def __init__(self, repo: Optional[IRecordingRepository] = None):
        self.repo = repo or SqlRecordingRepo()

    def index_folder(self, request: IndexRequest) -> IndexSummary:
        """
        Lists the folder, parses every line and upserts in batches.
        Traversal errors on the root are not caught.
        """
        summary = IndexSummary()
        batch: List[RecordingMetadata] = []
        logger.info(f"Starting index of: {request.root_path}")

        for entry in list_wav_files(request.root_path):
            summary.files_found += 1

            metadata = parse_file_metadata(entry.line)
            if metadata is None:
                logger.debug(f"Skipping unrecognised name: {entry.line}")
                summary.files_skipped += 1
                continue

            try:
                metadata.file_size = entry.path.stat().st_size
            except OSError as e:
                error_msg = f"Failed to stat {entry.line}: {e}"
                logger.error(error_msg)
                summary.errors.append(error_msg)
                continue

            batch.append(metadata)
            if len(batch) >= request.batch_size:
                self._flush(batch, summary)
                batch = []

        if batch:
            self._flush(batch, summary)

        logger.info(f"Index complete. Indexed {summary.files_indexed}/{summary.files_found} files.")
        return summary

    def _flush(self, batch: List[RecordingMetadata], summary: IndexSummary):
        try:
            written = self.repo.upsert_files(batch)
            summary.files_indexed += written
            logger.debug(f"Indexed batch of {written} (total {summary.files_indexed})")
        except SQLAlchemyError as e:
            error_msg = f"Failed to index batch starting at {batch[0].file_path}: {e}"
            logger.error(error_msg)
            summary.errors.append(error_msg)
