# src/asyncocr/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from queue import Queue
from typing import List, Optional

from .config import BenchConfig, DEFAULT_STRATEGIES
from .exceptions import AsyncOCRError
from .logger import configure_logging, setup_logging
from .parallel import BenchmarkRunner

__all__ = ["run_benchmark", "main"]

logger = logging.getLogger("asyncocr")


def run_benchmark(config: BenchConfig):
    """
    Generate the sample corpus and run every configured strategy over it.
    """
    config.validate()

    logger.info("Starting asyncOCR")
    logger.info("Sample directory, %s", config.output_dir)
    logger.info(
        "Samples, %s | Strategies, %s | Seed, %s",
        config.sample_count, ", ".join(config.strategies), config.seed,
    )

    runner = BenchmarkRunner(config)
    summaries = runner.run()

    logger.info("asyncOCR processing complete")
    return summaries


# -------------------------------
# CLI parsing
# -------------------------------

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="asyncOCR: compare sequential and concurrent simulated OCR over sample PDFs"
    )

    p.add_argument("-n", "--count", type=int, help="Number of sample PDFs to generate (default 5)")
    p.add_argument("-o", "--output-dir", type=Path, help="Directory for the generated sample PDFs")
    p.add_argument("--seed", type=int, help="Seed for the simulated latencies")
    p.add_argument(
        "--strategy",
        action="append",
        dest="strategies",
        choices=DEFAULT_STRATEGIES,
        help="Strategy to run; can be used multiple times (default: all, in order)",
    )
    p.add_argument("--results-path", type=Path, help="Append every processing result to this JSONL file")
    p.add_argument("-q", "--quiet", action="store_true", help="Only print the report, no logs or progress bars")

    log_group = p.add_argument_group("Logging")
    log_group.add_argument("--log-file", type=Path, help="Path of a persistent log file")
    log_group.add_argument("--log-performance", action="store_true", help="Enable performance logging to a file")
    log_group.add_argument("--performance-log-path", type=Path, help="Path for the performance log JSONL file")

    return p.parse_args(argv)


# -------------------------------
# Entry points
# -------------------------------

def main(argv: Optional[List[str]] = None):
    args = _parse_args(argv)

    log_queue: Queue = Queue(-1)
    configure_logging(log_queue)
    listener = setup_logging(
        log_queue,
        level=logging.WARNING if args.quiet else logging.INFO,
        file_path=args.log_file,
        file_level=logging.INFO,
    )
    listener.start()

    try:
        cfg_dict = {
            "output_dir": args.output_dir,
            "sample_count": args.count,
            "seed": args.seed,
            "strategies": args.strategies,
            "results_path": args.results_path,
            "log_performance": args.log_performance,
            "performance_log_path": args.performance_log_path,
            "show_progress": not args.quiet,
        }
        cfg_dict = {k: v for k, v in cfg_dict.items() if v is not None}

        try:
            config = BenchConfig.from_dict(cfg_dict)
            run_benchmark(config)
        except (AsyncOCRError, ValueError) as e:
            logger.error("Setup failed, %s", e)
            raise SystemExit(f"asyncocr: {e}")
    finally:
        try:
            listener.stop()
        except Exception:
            pass


if __name__ == "__main__":
    main(sys.argv[1:])
