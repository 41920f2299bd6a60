from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract_pages(self, path: Path) -> Iterator[str]:
        """Lazily yield the text of every page of the PDF at *path*.

        The iterator is finite and can only be consumed once. Pages without
        a text layer yield an empty string.

        Raises:
            PdfExtractionError: if the file cannot be opened or read.
        """

    def extract(self, path: Path) -> str:
        """Return the text of all pages concatenated without a separator."""
        return "".join(self.extract_pages(path))
