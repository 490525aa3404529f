# File: reclist/cli.py

import argparse
import logging
import os
import sys

from reclist.core.common.enums import SortColumn, SortDirection
from reclist.core.config.settings import settings
from reclist.features.listing.service.api import print_listing

LS_USAGE = "Usage: reclist-ls <root_dir>"

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def ls_main(argv=None) -> int:
    """
    reclist-ls <root_dir>
    Prints "<folder>/<file>.wav" for every match one level below root_dir.
    """
    argv = sys.argv if argv is None else argv
    if len(argv) < 2:
        print(LS_USAGE, file=sys.stderr)
        return 1

    configure_logging()
    # Enumeration errors propagate on purpose: the process dies non-zero.
    print_listing(argv[1], sys.stdout)
    return 0


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _catalog(db_url=None):
    # Imported here so reclist-ls never touches the database configuration
    from reclist.core.database.connection import build_engine, build_session_factory, init_db
    from reclist.features.catalog.data.repository import SqlRecordingRepo
    from reclist.features.catalog.service.api import CatalogService

    if db_url:
        engine = build_engine(db_url)
    else:
        settings.ensure_dirs()
        engine = build_engine(settings.DATABASE_URL)
    init_db(engine)
    return CatalogService(SqlRecordingRepo(build_session_factory(engine)))


def index_main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="reclist-index",
        description="Catalogue the .wav recordings below a root folder.",
    )
    parser.add_argument("root_dir", help="Folder holding one subfolder per day (M_D_YYYY).")
    parser.add_argument("--db-url", help="SQLAlchemy URL (default: settings.DATABASE_URL).")
    parser.add_argument("--batch-size", type=positive_int, default=settings.INDEX_BATCH_SIZE,
                        help="Rows per transaction (default: %(default)s).")
    args = parser.parse_args(argv)

    configure_logging()
    catalog = _catalog(args.db_url)
    summary = catalog.index_recordings(args.root_dir, batch_size=args.batch_size)

    print(f"[INFO] Found {summary.files_found} file(s), indexed {summary.files_indexed}, "
          f"skipped {summary.files_skipped}.", file=sys.stderr)
    for error in summary.errors:
        print(f"[ERR] {error}", file=sys.stderr)

    return 1 if summary.errors else 0


def query_main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="reclist-query",
        description="Look up catalogued recordings.",
    )
    parser.add_argument("--db-url", help="SQLAlchemy URL (default: settings.DATABASE_URL).")
    parser.add_argument("--date-start", help="M_D_YYYY or YYYY-MM-DD")
    parser.add_argument("--date-end", help="M_D_YYYY or YYYY-MM-DD")
    parser.add_argument("--phone", help="Substring of the phone number.")
    parser.add_argument("--email", help="Substring of the agent email.")
    parser.add_argument("--duration-min", type=float, help="Minimum duration in seconds.")
    parser.add_argument("--time-start", help="HH:MM:SS")
    parser.add_argument("--time-end", help="HH:MM:SS")
    parser.add_argument("--sort", choices=[c.value for c in SortColumn], default=SortColumn.DATE.value)
    parser.add_argument("--direction", choices=[d.value for d in SortDirection], default=SortDirection.DESC.value)
    parser.add_argument("-n", "--limit", type=int, default=25)
    parser.add_argument("--offset", type=int, default=0)
    parser.add_argument("--stats", action="store_true", help="Print catalogue statistics and exit.")
    args = parser.parse_args(argv)

    configure_logging()
    catalog = _catalog(args.db_url)
    db_url = args.db_url or settings.DATABASE_URL

    if args.stats:
        print(f"Total files: {catalog.count_recordings()}")
        print(f"Database: {db_url}")
        if db_url.startswith("sqlite:///"):
            db_file = db_url[len("sqlite:///"):]
            size = os.path.getsize(db_file) if os.path.exists(db_file) else 0
            print(f"Database size: {size} bytes")
        return 0

    from reclist.features.catalog.domain.models import FileQuery

    try:
        query = FileQuery(
            date_start=args.date_start,
            date_end=args.date_end,
            phone=args.phone,
            email=args.email,
            duration_min=args.duration_min,
            time_start=args.time_start,
            time_end=args.time_end,
            sort_column=SortColumn(args.sort),
            sort_direction=SortDirection(args.direction),
            limit=args.limit,
            offset=args.offset,
        )
        result = catalog.query_recordings(query)
    except ValueError as e:
        parser.error(str(e))

    for record in result.files:
        print(record.file_path)
    logger.info(f"Showing {len(result.files)} of {result.total_count} (more: {result.has_more})")
    return 0


if __name__ == "__main__":
    sys.exit(ls_main())
