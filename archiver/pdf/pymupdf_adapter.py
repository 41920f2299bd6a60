from collections.abc import Iterator
from pathlib import Path

import pymupdf

from archiver.pdf.base import BasePdfExtractor
from archiver.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page text using PyMuPDF."""

    def extract_pages(self, path: Path) -> Iterator[str]:
        try:
            with pymupdf.open(path, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                for page in doc:
                    yield page.get_text()
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed for {path}: {exc}") from exc
