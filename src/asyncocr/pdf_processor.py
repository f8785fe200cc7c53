# src/asyncocr/pdf_processor.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path

import fitz  # PyMuPDF

from .exceptions import DocumentCreationError, FileProcessingError

logger = logging.getLogger("asyncocr")

PAGE_MARGIN = 72
FONT_SIZE = 12


# --- Step 1, interface ---
class BasePDFProcessor(ABC):
    """
    Interface for the engine that writes sample documents and reads their metadata.
    """

    @abstractmethod
    def create_document(self, file_path: Path, content: str, page_count: int = 1) -> Path:
        """Writes a document with one text page per requested page and returns its path."""
        raise NotImplementedError

    @abstractmethod
    def get_page_count(self, file_path: Path) -> int:
        """Returns the number of pages, raises FileProcessingError when unreadable."""
        raise NotImplementedError


# --- Step 2, concrete implementation with PyMuPDF ---
class PyMuPDFProcessor(BasePDFProcessor):
    """PDF processor that uses PyMuPDF."""

    def create_document(self, file_path: Path, content: str, page_count: int = 1) -> Path:
        file_path = Path(file_path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with fitz.open() as doc:
                for page_num in range(1, page_count + 1):
                    page_text = (
                        f"Page {page_num}\n\n{content}\n\n"
                        f"Generated on: {datetime.now():%Y-%m-%d %H:%M:%S}"
                    )
                    page = doc.new_page()
                    box = fitz.Rect(
                        PAGE_MARGIN, PAGE_MARGIN,
                        page.rect.width - PAGE_MARGIN, page.rect.height - PAGE_MARGIN,
                    )
                    page.insert_textbox(box, page_text, fontsize=FONT_SIZE, align=fitz.TEXT_ALIGN_LEFT)
                doc.save(str(file_path))
        except Exception as e:
            raise DocumentCreationError(f"Could not write {file_path.name}, {e}") from e

        logger.debug("Created %s with %d pages", file_path, page_count)
        return file_path

    def get_page_count(self, file_path: Path) -> int:
        file_path = Path(file_path)
        try:
            with fitz.open(file_path) as doc:
                return doc.page_count
        except Exception as e:
            raise FileProcessingError(f"Cannot open {file_path.name}, {e}") from e


# --- Step 3, factory ---
def get_pdf_processor(engine_name: str = "pymupdf") -> BasePDFProcessor:
    """
    Create a PDF processor by name.
    """
    name = (engine_name or "").lower()
    if name == "pymupdf":
        return PyMuPDFProcessor()
    raise ValueError(f"Unknown PDF engine, '{engine_name}'. Supported engines, ['pymupdf']")
