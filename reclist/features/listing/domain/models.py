from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class ListingEntry:
    """
    One matching audio file found one level below the root.
    """
    folder: str
    filename: str
    path: Path

    @property
    def line(self) -> str:
        # Always "/" regardless of host separator
        return f"{self.folder}/{self.filename}"
