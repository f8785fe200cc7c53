"""Tests for the PyMuPDF collaborator."""
import fitz
import pytest

from asyncocr.exceptions import FileProcessingError
from asyncocr.pdf_processor import PyMuPDFProcessor, get_pdf_processor


class TestPyMuPDFProcessor:
    """Tests for PyMuPDFProcessor."""

    def test_create_document_writes_pages(self, tmp_path, pdf_processor):
        path = pdf_processor.create_document(tmp_path / "doc.pdf", "hello world", page_count=3)
        with fitz.open(path) as doc:
            assert doc.page_count == 3
            first = doc[0].get_text()
            assert "Page 1" in first
            assert "hello world" in first
            assert "Page 3" in doc[2].get_text()

    def test_get_page_count_missing_file(self, tmp_path, pdf_processor):
        with pytest.raises(FileProcessingError):
            pdf_processor.get_page_count(tmp_path / "missing.pdf")


def test_factory():
    assert isinstance(get_pdf_processor("PyMuPDF"), PyMuPDFProcessor)
    with pytest.raises(ValueError):
        get_pdf_processor("pdfium")
