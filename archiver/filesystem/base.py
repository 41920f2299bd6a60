from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class BaseFileSystem(ABC):
    """Contract for the filesystem primitives used when archiving a document.

    Every operation raises ``OSError`` on failure.
    """

    @abstractmethod
    def move(self, source: Path, target: Path) -> None:
        """Move the file at *source* to *target*."""

    @abstractmethod
    def create_directories(self, path: Path) -> None:
        """Create *path* and any missing parents; existing folders are fine."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return whether anything occupies *path*."""


class BaseTagStore(ABC):
    """Contract for tags stored alongside a file, outside of its name."""

    @abstractmethod
    def get_tags(self, path: Path) -> list[str]:
        """Return the tags of the file at *path*, empty if it has none."""

    @abstractmethod
    def set_tags(self, path: Path, tags: Sequence[str]) -> None:
        """Replace the tags of the file at *path*.

        Raises:
            OSError: if the tags cannot be written.
        """

    def discard_tags(self, path: Path) -> None:
        """Forget the tags kept for *path* after its file moved away.

        Stores that keep tags on the file itself have nothing to drop.
        """
