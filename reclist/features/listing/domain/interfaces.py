from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator
from .models import ListingEntry

class IFolderWalker(ABC):
    """
    Contract for the two-level folder traversal.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[ListingEntry]:
        """
        Yields one entry per matching file inside each immediate
        subdirectory of root, in enumeration order.
        Enumeration errors are not caught.
        """
        pass
