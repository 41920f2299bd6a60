from unittest.mock import MagicMock

import pytest

from archiver.pdf.factory import PdfExtractorFactory
from archiver.pdf.pdfplumber_adapter import PdfPlumberAdapter
from archiver.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPdfExtractorFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(MagicMock(pdf_engine="pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(MagicMock(pdf_engine="pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = PdfExtractorFactory.create(MagicMock(pdf_engine="PdfPlumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create(MagicMock(pdf_engine="unknown"))
