from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _write_pdf(path: Path, pages: list[str]) -> Path:
    """Write a PDF with one line of text per page; empty strings give blank pages."""
    c = canvas.Canvas(str(path), pagesize=letter)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return path


@pytest.fixture()
def sample_pdf_path(tmp_path: Path) -> Path:
    """A single-page PDF with known text content."""
    return _write_pdf(tmp_path / "scan1.pdf", ["Invoice dated 24.12.2019"])


@pytest.fixture()
def multi_page_pdf_path(tmp_path: Path) -> Path:
    """A two-page PDF with known text on each page."""
    return _write_pdf(tmp_path / "scan2.pdf", ["Page one content", "Page two content"])


@pytest.fixture()
def empty_pdf_path(tmp_path: Path) -> Path:
    """A valid PDF with a blank page and no text layer."""
    return _write_pdf(tmp_path / "blank.pdf", [""])
