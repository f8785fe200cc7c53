# src/asyncocr/processors.py
from __future__ import annotations

import asyncio
import logging
import time
from typing import List

from .delays import DelayProvider
from .models import ERROR_MARKER, ProcessingResult, WorkDescriptor
from .pdf_processor import BasePDFProcessor
from .utils import current_worker_id

logger = logging.getLogger("asyncocr")

PAGE_SEPARATOR = "\n\n"


def simulated_page_text(page_num: int, file_name: str) -> str:
    return (
        f"Page {page_num} from {file_name}: This is simulated OCR text extracted from the PDF document. "
        "The content includes various characters and formatting that would be recognized by a real OCR engine. "
        "Processing time and accuracy are simulated for demonstration purposes."
    )


class SimulatedOCRProcessor:
    """
    Runs the staged, I/O-bound OCR simulation for one document at a time.

    Each stage is a single ``await``: metadata read, OCR engine work, then one
    wait per page. Many documents can be in flight on one event loop.
    """

    def __init__(self, pdf_processor: BasePDFProcessor, delays: DelayProvider):
        self.pdf_processor = pdf_processor
        self.delays = delays

    async def _read_page_count(self, descriptor: WorkDescriptor) -> int:
        await asyncio.sleep(self.delays.metadata_delay())
        return self.pdf_processor.get_page_count(descriptor.source_path)

    async def _extract_text(self, file_name: str, page_count: int) -> str:
        pages: List[str] = []
        for page_num in range(1, page_count + 1):
            await asyncio.sleep(self.delays.page_delay())
            pages.append(simulated_page_text(page_num, file_name))
        return PAGE_SEPARATOR.join(pages)

    async def process(self, descriptor: WorkDescriptor) -> ProcessingResult:
        """
        Simulate OCR on one document.
        Failures come back as an error-marked result with zero pages, never as an exception.
        """
        start = time.perf_counter()
        worker_id = current_worker_id()
        file_name = descriptor.name

        logger.info("Starting OCR for %s on %s", file_name, worker_id)
        try:
            page_count = await self._read_page_count(descriptor)
            await asyncio.sleep(self.delays.ocr_delay())
            extracted_text = await self._extract_text(file_name, page_count)
        except Exception as e:
            logger.warning("Error processing %s, %s", file_name, e)
            return ProcessingResult(
                file_name=file_name,
                extracted_text=f"{ERROR_MARKER}{e}",
                page_count=0,
                processing_seconds=time.perf_counter() - start,
                worker_id=worker_id,
            )

        logger.info("Completed OCR for %s on %s", file_name, worker_id)
        return ProcessingResult(
            file_name=file_name,
            extracted_text=extracted_text,
            page_count=page_count,
            processing_seconds=time.perf_counter() - start,
            worker_id=worker_id,
        )
