from pathlib import Path
from typing import Iterator
from reclist.core.config.settings import settings
from ..domain.interfaces import IFolderWalker
from ..domain.models import ListingEntry

class LocalFolderWalker(IFolderWalker):
    """
    Walks exactly two levels with pathlib: root -> folders -> files.
    """

    def __init__(self, extension: str = settings.AUDIO_EXTENSION):
        # Case-sensitive: ".WAV" does not match ".wav"
        self.extension = extension

    def walk(self, root: Path) -> Iterator[ListingEntry]:
        for folder in root.iterdir():
            if not folder.is_dir():
                continue

            for item in folder.iterdir():
                if item.is_file() and item.suffix == self.extension:
                    yield ListingEntry(
                        folder=folder.name,
                        filename=item.name,
                        path=item
                    )
