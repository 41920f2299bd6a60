from pathlib import Path

import pytest

from archiver.pdf.exceptions import PdfExtractionError
from archiver.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_extract_returns_text(self, sample_pdf_path: Path) -> None:
        assert "Invoice dated 24.12.2019" in PyMuPdfAdapter().extract(sample_pdf_path)

    def test_extract_pages_yields_one_string_per_page(self, multi_page_pdf_path: Path) -> None:
        pages = list(PyMuPdfAdapter().extract_pages(multi_page_pdf_path))
        assert len(pages) == 2
        assert "Page two content" in pages[1]

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_path: Path) -> None:
        assert PyMuPdfAdapter().extract(empty_pdf_path).strip() == ""

    def test_extract_raises_on_invalid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"not a pdf")
        with pytest.raises(PdfExtractionError):
            PyMuPdfAdapter().extract(path)
