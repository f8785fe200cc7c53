"""Pytest configuration and fixtures."""
from pathlib import Path

import pytest

from asyncocr.delays import FixedDelayProvider, ZeroDelayProvider
from asyncocr.exceptions import FileProcessingError
from asyncocr.generator import generate_samples
from asyncocr.pdf_processor import BasePDFProcessor, PyMuPDFProcessor
from asyncocr.processors import SimulatedOCRProcessor


class FailingPDFProcessor(BasePDFProcessor):
    """Real PDF processor that refuses to read the documents named in ``broken``."""

    def __init__(self, broken):
        self.inner = PyMuPDFProcessor()
        self.broken = set(broken)

    def create_document(self, file_path, content, page_count=1):
        return self.inner.create_document(file_path, content, page_count)

    def get_page_count(self, file_path):
        if Path(file_path).name in self.broken:
            raise FileProcessingError(f"Cannot open {Path(file_path).name}, simulated corruption")
        return self.inner.get_page_count(file_path)


@pytest.fixture
def pdf_processor():
    return PyMuPDFProcessor()


@pytest.fixture
def sample_corpus(tmp_path, pdf_processor):
    """Five generated sample PDFs, page counts [2, 3, 1, 2, 3]."""
    return generate_samples(5, tmp_path / "samples", pdf_processor, show_progress=False)


@pytest.fixture
def zero_delays():
    return ZeroDelayProvider()


@pytest.fixture
def fixed_delays():
    """Small constant latencies, enough to make overlap measurable."""
    return FixedDelayProvider(metadata=0.02, ocr=0.05, page=0.05)


@pytest.fixture
def fast_processor(pdf_processor, zero_delays):
    return SimulatedOCRProcessor(pdf_processor, zero_delays)


@pytest.fixture
def timed_processor(pdf_processor, fixed_delays):
    return SimulatedOCRProcessor(pdf_processor, fixed_delays)


@pytest.fixture
def make_failing_processor(zero_delays):
    """Build a processor whose metadata read fails for the given file names."""
    def _make(*broken):
        return SimulatedOCRProcessor(FailingPDFProcessor(broken), zero_delays)
    return _make


@pytest.fixture
def make_failing_pdf_processor():
    """Build a PDF collaborator whose page count read fails for the given file names."""
    def _make(*broken):
        return FailingPDFProcessor(broken)
    return _make
