# File: reclist/features/listing/service/api.py
from pathlib import Path
from typing import Iterator, TextIO, Union
from ..data.folder_walker import LocalFolderWalker
from ..domain.models import ListingEntry

def list_wav_files(root: Union[str, Path]) -> Iterator[ListingEntry]:
    """
    Public API for the folder listing.
    The root is not checked up front; a missing or unreadable root
    raises OSError on first iteration.
    """
    walker = LocalFolderWalker()
    return walker.walk(Path(root))

def print_listing(root: Union[str, Path], stream: TextIO) -> int:
    """
    Writes "<folder>/<filename>" per match as it is found.
    Returns the number of lines written.
    """
    written = 0
    for entry in list_wav_files(root):
        stream.write(f"{entry.line}\n")
        written += 1
    return written
