# asyncocr/parallel.py
from __future__ import annotations

import asyncio
import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, Dict, List, Optional, Sequence

from .config import BenchConfig
from .delays import DelayProvider, RandomDelayProvider
from .generator import generate_samples
from .models import ProcessingResult, RunSummary, WorkDescriptor
from .pdf_processor import BasePDFProcessor, get_pdf_processor
from .processors import SimulatedOCRProcessor
from .report import Reporter, summarize

logger = logging.getLogger("asyncocr")

CompletionCallback = Callable[[ProcessingResult], None]


@dataclass
class StrategyRun:
    """Results of one strategy over a corpus, with the wall time of the whole batch."""
    name: str
    results: List[ProcessingResult] = field(default_factory=list)
    wall_seconds: float = 0.0

    @property
    def summary(self) -> RunSummary:
        return summarize(self.results, self.wall_seconds, self.name)


def _notify(on_complete: Optional[CompletionCallback], result: ProcessingResult):
    """Call the observer, a failing observer never affects the batch."""
    if on_complete is None:
        return
    try:
        on_complete(result)
    except Exception:
        logger.exception("Completion callback failed for %s", result.file_name)


# -----------------------------
# Strategies
# -----------------------------
async def run_sequential(corpus: Sequence[WorkDescriptor], processor: SimulatedOCRProcessor,
                         on_complete: Optional[CompletionCallback] = None) -> StrategyRun:
    """Process one document at a time, in corpus order."""
    start = time.perf_counter()
    results: List[ProcessingResult] = []
    for descriptor in corpus:
        result = await processor.process(descriptor)
        results.append(result)
        _notify(on_complete, result)
    return StrategyRun("sequential", results, time.perf_counter() - start)


async def run_concurrent(corpus: Sequence[WorkDescriptor], processor: SimulatedOCRProcessor,
                         on_complete: Optional[CompletionCallback] = None) -> StrategyRun:
    """
    Start every document at once and wait for all of them.
    Results come back in corpus order, ``on_complete`` is only called after the join.
    """
    start = time.perf_counter()
    tasks = [
        asyncio.create_task(processor.process(descriptor), name=f"ocr-{i}")
        for i, descriptor in enumerate(corpus, start=1)
    ]
    results = list(await asyncio.gather(*tasks))
    wall_seconds = time.perf_counter() - start
    for result in results:
        _notify(on_complete, result)
    return StrategyRun("concurrent", results, wall_seconds)


async def run_concurrent_with_progress(corpus: Sequence[WorkDescriptor], processor: SimulatedOCRProcessor,
                                       on_complete: Optional[CompletionCallback] = None) -> StrategyRun:
    """
    Same scheduling as run_concurrent, but every document reports the moment it finishes.
    Observer calls happen in real completion order, results stay in corpus order.
    """
    total = len(corpus)
    completed = 0

    async def _process_and_report(descriptor: WorkDescriptor) -> ProcessingResult:
        nonlocal completed
        result = await processor.process(descriptor)
        completed += 1
        logger.progress(
            "Completed OCR: %s", descriptor.name,
            extra={"phase": "ocr", "current": completed, "total": total},
        )
        _notify(on_complete, result)
        return result

    start = time.perf_counter()
    tasks = [
        asyncio.create_task(_process_and_report(descriptor), name=f"ocr-{i}")
        for i, descriptor in enumerate(corpus, start=1)
    ]
    results = list(await asyncio.gather(*tasks))
    return StrategyRun("concurrent_progress", results, time.perf_counter() - start)


Strategy = Callable[..., Awaitable[StrategyRun]]

STRATEGIES: Dict[str, Strategy] = {
    "sequential": run_sequential,
    "concurrent": run_concurrent,
    "concurrent_progress": run_concurrent_with_progress,
}


def strategy_key(name: str) -> str:
    """Canonical registry key, accepts hyphens and any case."""
    return (name or "").lower().replace("-", "_")


def get_strategy(name: str) -> Strategy:
    """
    Look up a strategy by name.
    """
    key = strategy_key(name)
    if key in STRATEGIES:
        return STRATEGIES[key]
    raise ValueError(f"Unknown strategy, '{name}'. Supported strategies, {sorted(STRATEGIES)}")


# --- MAIN RUNNER CLASS ---

class BenchmarkRunner:
    def __init__(self, config: BenchConfig, pdf_processor: Optional[BasePDFProcessor] = None,
                 delays: Optional[DelayProvider] = None, reporter: Optional[Reporter] = None):
        self.config = config
        self.pdf_processor = pdf_processor or get_pdf_processor(config.pdf_engine)
        self.delays = delays or RandomDelayProvider.from_config(config)
        self.processor = SimulatedOCRProcessor(self.pdf_processor, self.delays)
        self.reporter = reporter or Reporter()

    # -----------------------------
    # Logging helpers
    # -----------------------------
    def _append_jsonl(self, path: Path, entry: Dict, what: str):
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                log_entry = {"timestamp": time.strftime("%Y-%m-%dT%H:%M:%S%z"), **entry}
                f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")
        except Exception:
            logger.exception("Failed to write %s", what)

    def _log_results(self, run: StrategyRun):
        if not self.config.results_path:
            return
        for result in run.results:
            self._append_jsonl(self.config.results_path, {"strategy": run.name, **result.to_dict()}, "results log")

    def _log_performance(self, summary: RunSummary):
        if not self.config.log_performance:
            return
        path = self.config.performance_log_path
        if not path:
            path = Path(self.config.output_dir) / "asyncocr_performance_log.jsonl"
            self.config.performance_log_path = path
        self._append_jsonl(path, {"metric_type": "strategy_run", **summary.to_dict()}, "performance log")

    # -----------------------------
    # Stages
    # -----------------------------
    def prepare(self) -> List[WorkDescriptor]:
        """Create the sample corpus. Errors here are fatal for the run."""
        corpus = generate_samples(
            self.config.sample_count, self.config.output_dir, self.pdf_processor,
            show_progress=self.config.show_progress,
        )
        self.reporter.banner(len(corpus))
        return corpus

    async def run_strategy(self, name: str, corpus: Sequence[WorkDescriptor]) -> StrategyRun:
        strategy = get_strategy(name)
        name = strategy_key(name)
        self.reporter.strategy_started(name)
        logger.info("Running %s strategy over %d documents", name, len(corpus))

        if strategy is run_sequential:
            run = await strategy(corpus, self.processor, on_complete=lambda r: self.reporter.results([r]))
        elif strategy is run_concurrent_with_progress:
            run = await strategy(corpus, self.processor, on_complete=self.reporter.item_completed)
            self.reporter.results(run.results)
        else:
            run = await strategy(corpus, self.processor)
            self.reporter.results(run.results)

        summary = run.summary
        self.reporter.summary(summary)
        logger.info("%s strategy finished in %.0fms", name, summary.wall_seconds * 1000)

        self._log_results(run)
        self._log_performance(summary)
        return run

    async def run_async(self, corpus: Sequence[WorkDescriptor]) -> List[RunSummary]:
        summaries: List[RunSummary] = []
        for name in self.config.strategies:
            run = await self.run_strategy(name, corpus)
            summaries.append(run.summary)
        return summaries

    # -----------------------------
    # Public entry point
    # -----------------------------
    def run(self, corpus: Optional[Sequence[WorkDescriptor]] = None) -> List[RunSummary]:
        logger.info("Run started")
        if corpus is None:
            corpus = self.prepare()

        summaries = asyncio.run(self.run_async(corpus))

        self.reporter.comparison(summaries)
        self.reporter.done()
        logger.info("Run finished")
        return summaries
