"""Tests for the simulated OCR processor."""
import asyncio
from pathlib import Path

import pytest

from asyncocr.delays import FixedDelayProvider
from asyncocr.models import ERROR_MARKER, WorkDescriptor
from asyncocr.processors import PAGE_SEPARATOR, SimulatedOCRProcessor, simulated_page_text


class RecordingDelays(FixedDelayProvider):
    """Fixed delays that remember which stage asked for them."""

    def __init__(self):
        super().__init__(0.0, 0.0, 0.0)
        self.calls = []

    def metadata_delay(self):
        self.calls.append("metadata")
        return 0.0

    def ocr_delay(self):
        self.calls.append("ocr")
        return 0.0

    def page_delay(self):
        self.calls.append("page")
        return 0.0


class TestSimulatedOCRProcessor:
    """Tests for SimulatedOCRProcessor."""

    @pytest.mark.asyncio
    async def test_fragments_per_page(self, sample_corpus, fast_processor):
        descriptor = sample_corpus[1]  # three pages
        result = await fast_processor.process(descriptor)

        assert not result.is_error
        assert result.page_count == 3
        fragments = result.extracted_text.split(PAGE_SEPARATOR)
        assert len(fragments) == 3
        for page_num, fragment in enumerate(fragments, start=1):
            assert fragment.startswith(f"Page {page_num} from {descriptor.name}:")
            assert fragment == simulated_page_text(page_num, descriptor.name)

    @pytest.mark.asyncio
    async def test_stage_order(self, sample_corpus, pdf_processor):
        delays = RecordingDelays()
        processor = SimulatedOCRProcessor(pdf_processor, delays)
        await processor.process(sample_corpus[0])  # two pages
        assert delays.calls == ["metadata", "ocr", "page", "page"]

    @pytest.mark.asyncio
    async def test_elapsed_covers_simulated_latency(self, sample_corpus, timed_processor):
        # 0.02 + 0.05 + 3 * 0.05
        result = await timed_processor.process(sample_corpus[1])
        assert result.processing_seconds >= 0.22
        assert result.worker_id

    @pytest.mark.asyncio
    async def test_missing_document_becomes_error_result(self, tmp_path, fast_processor):
        descriptor = WorkDescriptor(name="ghost.pdf", source_path=tmp_path / "ghost.pdf", page_count=2, content="")
        result = await fast_processor.process(descriptor)

        assert result.is_error
        assert result.extracted_text.startswith(ERROR_MARKER)
        assert result.page_count == 0
        assert result.file_name == "ghost.pdf"

    @pytest.mark.asyncio
    async def test_metadata_failure_becomes_error_result(self, sample_corpus, make_failing_processor):
        processor = make_failing_processor("sample-document-1.pdf")
        result = await processor.process(sample_corpus[0])
        assert result.page_count == 0
        assert result.extracted_text.startswith("Error: ")
        assert "simulated corruption" in result.extracted_text

    @pytest.mark.asyncio
    async def test_process_is_cancellable(self, sample_corpus, pdf_processor):
        processor = SimulatedOCRProcessor(pdf_processor, FixedDelayProvider(metadata=10.0))
        task = asyncio.create_task(processor.process(sample_corpus[0]))
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
