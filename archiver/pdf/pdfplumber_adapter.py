from collections.abc import Iterator
from pathlib import Path

import pdfplumber

from archiver.pdf.base import BasePdfExtractor
from archiver.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts page text using pdfplumber."""

    def extract_pages(self, path: Path) -> Iterator[str]:
        try:
            with pdfplumber.open(path) as pdf:
                for page in pdf.pages:
                    yield page.extract_text() or ""
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed for {path}: {exc}") from exc
