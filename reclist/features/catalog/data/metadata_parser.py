import logging
import re
from datetime import datetime
from typing import Optional
from ..domain.models import RecordingMetadata

logger = logging.getLogger(__name__)

RECORDINGS_PREFIX = "recordings/"

# Filename convention: "{phone} by {email} @ {H_MM_SS AM}_{duration_ms}.wav"
PHONE_RE = re.compile(r"^(\d+)")
EMAIL_RE = re.compile(r"by ([^@]+@[^ ]+)")
TIME_RE = re.compile(r"@ ([\d_]+ [AP]M)")
DURATION_RE = re.compile(r"_(\d+)\.wav$")

TIME_FORMATS = ("%I:%M:%S %p", "%I:%M %p")


def _to_date(month: str, day: str, year: str) -> str:
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def convert_date_format(value: Optional[str]) -> Optional[str]:
    """
    M_D_YYYY -> YYYY-MM-DD. Anything else is assumed to already be ISO
    and is returned as is.
    """
    if not value:
        return None

    parts = value.split("_")
    if len(parts) == 3:
        return _to_date(*parts)

    return value


def parse_call_time(raw: str) -> str:
    """
    "3_45_12 PM" -> "15:45:12". Returns "" when the text is not a clock time.
    """
    text = raw.replace("_", ":")
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).strftime("%H:%M:%S")
        except ValueError:
            continue

    logger.warning(f"Failed to parse time: {text}")
    return ""


def parse_file_metadata(file_path: str) -> Optional[RecordingMetadata]:
    """
    Extracts call details from a listing line such as
    "9_3_2025/5551234567 by agent@example.com @ 3_45_12 PM_61000.wav".

    Returns None when the line has no folder/filename pair or the folder
    is not a M_D_YYYY date. Missing name fields fall back to ""/0.
    """
    clean = file_path[len(RECORDINGS_PREFIX):] if file_path.startswith(RECORDINGS_PREFIX) else file_path
    parts = clean.split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    folder, filename = parts[0], parts[1]

    date_parts = folder.split("_")
    if len(date_parts) != 3:
        return None
    call_date = _to_date(*date_parts)

    phone_match = PHONE_RE.search(filename)
    email_match = EMAIL_RE.search(filename)
    time_match = TIME_RE.search(filename)
    duration_match = DURATION_RE.search(filename)

    return RecordingMetadata(
        file_path=file_path,
        phone=phone_match.group(1) if phone_match else "",
        email=email_match.group(1) if email_match else "",
        call_date=call_date,
        call_time=parse_call_time(time_match.group(1)) if time_match else "",
        duration_ms=int(duration_match.group(1)) if duration_match else 0,
    )
