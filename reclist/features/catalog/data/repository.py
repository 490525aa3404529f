from typing import Iterable, List
from reclist.core.common.enums import SortColumn, SortDirection
from reclist.core.database.connection import SessionLocal
from .metadata_parser import convert_date_format
from .sql_models import RecordingFileModel, utc_now
from ..domain.interfaces import IRecordingRepository
from ..domain.models import RecordingMetadata, FileQuery, QueryResult

SORT_COLUMNS = {
    SortColumn.DATE: RecordingFileModel.call_date,
    SortColumn.TIME: RecordingFileModel.call_time,
    SortColumn.PHONE: RecordingFileModel.phone,
    SortColumn.EMAIL: RecordingFileModel.email,
    SortColumn.DURATION: RecordingFileModel.duration_ms,
}

# Copied onto the row on insert and on update
FIELDS = ("phone", "email", "call_date", "call_time", "duration_ms", "file_size")


def _to_metadata(row: RecordingFileModel) -> RecordingMetadata:
    return RecordingMetadata(
        file_path=row.file_path,
        phone=row.phone,
        email=row.email,
        call_date=row.call_date,
        call_time=row.call_time,
        duration_ms=row.duration_ms,
        file_size=row.file_size,
    )


class SqlRecordingRepo(IRecordingRepository):
    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def upsert_files(self, records: Iterable[RecordingMetadata]) -> int:
        """
        Transactional logic:
        1. Load rows that already exist for these paths.
        2. Update them in place, insert the rest.
        3. Commit once for the whole batch.
        """
        records = list(records)
        if not records:
            return 0

        with self.session_factory() as db:
            try:
                paths = [r.file_path for r in records]
                existing = {
                    row.file_path: row
                    for row in db.query(RecordingFileModel).filter(
                        RecordingFileModel.file_path.in_(paths)
                    )
                }

                for record in records:
                    values = {name: getattr(record, name) for name in FIELDS}
                    row = existing.get(record.file_path)
                    if row is None:
                        row = RecordingFileModel(file_path=record.file_path, **values)
                        db.add(row)
                        existing[record.file_path] = row
                    else:
                        for name, value in values.items():
                            setattr(row, name, value)
                        row.updated_at = utc_now()

                db.commit()
                return len(records)
            except Exception as e:
                db.rollback()
                raise e

    def query_files(self, query: FileQuery) -> QueryResult:
        with self.session_factory() as db:
            q = db.query(RecordingFileModel)

            date_start = convert_date_format(query.date_start)
            date_end = convert_date_format(query.date_end)

            if date_start is not None:
                q = q.filter(RecordingFileModel.call_date >= date_start)
            if date_end is not None:
                q = q.filter(RecordingFileModel.call_date <= date_end)
            if query.phone:
                q = q.filter(RecordingFileModel.phone.contains(query.phone))
            if query.email:
                q = q.filter(RecordingFileModel.email.contains(query.email))
            if query.duration_min is not None:
                q = q.filter(RecordingFileModel.duration_ms >= query.duration_min * 1000)
            if query.time_start:
                q = q.filter(RecordingFileModel.call_time >= query.time_start)
            if query.time_end:
                q = q.filter(RecordingFileModel.call_time <= query.time_end)

            total = q.count()

            column = SORT_COLUMNS[SortColumn(query.sort_column)]
            primary = column.asc() if SortDirection(query.sort_direction) == SortDirection.ASC else column.desc()

            rows: List[RecordingFileModel] = (
                q.order_by(
                    primary,
                    RecordingFileModel.call_date.desc(),
                    RecordingFileModel.call_time.desc(),
                )
                .offset(query.offset)
                .limit(query.limit)
                .all()
            )

            return QueryResult(
                files=[_to_metadata(row) for row in rows],
                total_count=total,
                has_more=query.offset + query.limit < total,
            )

    def count_files(self) -> int:
        with self.session_factory() as db:
            return db.query(RecordingFileModel).count()
