# src/asyncocr/report.py
from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO

from .models import ProcessingResult, RunSummary

STRATEGY_TITLES = {
    "sequential": "Sequential PDF OCR Processing",
    "concurrent": "Concurrent PDF OCR Processing",
    "concurrent_progress": "Concurrent OCR Processing with Progress Tracking",
}

STRATEGY_DESCRIPTIONS = {
    "sequential": "Processing PDFs one at a time (blocking approach)...",
    "concurrent": "Processing all PDFs simultaneously (non-blocking approach)...",
    "concurrent_progress": "Processing PDFs concurrently while tracking progress...",
}


def summarize(results: Iterable[ProcessingResult], wall_seconds: float, strategy: str) -> RunSummary:
    """
    Fold a completed result set into a RunSummary.
    Wall time comes from the orchestrator, item durations are never summed into it.
    """
    total_characters = 0
    total_pages = 0
    item_count = 0
    error_count = 0
    for result in results:
        total_characters += result.text_length
        total_pages += result.page_count
        item_count += 1
        if result.is_error:
            error_count += 1
    return RunSummary(
        strategy=strategy,
        wall_seconds=wall_seconds,
        total_characters=total_characters,
        total_pages=total_pages,
        item_count=item_count,
        error_count=error_count,
    )


def format_result(result: ProcessingResult) -> str:
    if result.is_error:
        return (
            f"  > PDF: {result.file_name} | {result.extracted_text} | Pages: 0 | "
            f"Time: {result.processing_seconds * 1000:.0f}ms | Worker: {result.worker_id}"
        )
    return (
        f"  > PDF: {result.file_name} | Pages: {result.page_count} | "
        f"Text Length: {result.text_length} chars | "
        f"Time: {result.processing_seconds * 1000:.0f}ms | Worker: {result.worker_id}"
    )


class Reporter:
    """Renders human readable report lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, line: str = ""):
        print(line, file=self.stream, flush=True)

    def banner(self, sample_count: int):
        self._write("===== Testing PDF OCR Processing using Python asyncio =====")
        self._write("Compares concurrent coroutines vs one-at-a-time processing for I/O operations")
        self._write()
        self._write(f"Created {sample_count} sample PDFs")
        self._write()

    def strategy_started(self, strategy: str):
        self._write(f"===== {STRATEGY_TITLES.get(strategy, strategy)} =====")
        self._write(STRATEGY_DESCRIPTIONS.get(strategy, ""))

    def item_completed(self, result: ProcessingResult):
        self._write(f"  > Completed OCR: {result.file_name}")

    def results(self, results: Iterable[ProcessingResult]):
        for result in results:
            self._write(format_result(result))

    def summary(self, summary: RunSummary):
        ms = summary.wall_seconds * 1000
        if summary.strategy == "concurrent_progress":
            self._write(f"All PDFs processed in {ms:.0f}ms")
            self._write(f"Average time per PDF: {summary.average_seconds_per_item * 1000:.0f}ms")
            self._write(f"Total pages processed: {summary.total_pages}")
        else:
            label = "Sequential" if summary.strategy == "sequential" else "Concurrent"
            self._write(f"{label} OCR processing completed in {ms:.0f}ms")
        if summary.error_count:
            self._write(f"Failed PDFs: {summary.error_count}")
        self._write(f"Total text extracted: {summary.total_characters} characters")
        self._write()

    def comparison(self, summaries: List[RunSummary]):
        if not summaries:
            return
        baseline = next((s for s in summaries if s.strategy == "sequential"), None)
        self._write("===== Strategy Comparison =====")
        for s in summaries:
            line = f"  {s.strategy:<20} {s.wall_seconds * 1000:>8.0f}ms"
            if baseline is not None and s.wall_seconds > 0:
                line += f"  x{baseline.wall_seconds / s.wall_seconds:.2f}"
            self._write(line)
        self._write()

    def done(self):
        self._write("===== Done. =====")
