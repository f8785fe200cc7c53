# src/asyncocr/generator.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from tqdm import tqdm

from .exceptions import DocumentCreationError
from .models import WorkDescriptor
from .pdf_processor import BasePDFProcessor
from .utils import safe_fname

logger = logging.getLogger("asyncocr")

SAMPLE_TEXTS = [
    "This is a sample document about Python concurrency patterns and asynchronous programming. "
    "Coroutines and the asyncio event loop provide a powerful way to handle I/O-bound operations efficiently.",
    "Cooperative multitasking is the recommended approach for many concurrent I/O operations in Python. "
    "It lets a single thread serve other work while waiting for I/O, improving overall application throughput.",
    "Concurrency allows multiple operations to make progress without blocking each other. "
    "This is different from parallelism, which uses multiple processes or cores for CPU-bound work.",
    "The async and await keywords make it easy to write non-blocking code in Python. "
    "They yield control back to the event loop while waiting for I/O operations to complete.",
    "Performance improvements from concurrency can be dramatic for I/O-bound operations. "
    "PDF processing and OCR are perfect examples of operations that benefit from concurrent execution.",
]


def sample_page_count(position: int) -> int:
    """Page count for the 1-indexed sample at ``position``, cycling through 1 to 3."""
    return 1 + (position % 3)


def generate_samples(count: int, output_dir: Path, pdf_processor: BasePDFProcessor,
                     show_progress: bool = True) -> List[WorkDescriptor]:
    """
    Create ``count`` sample documents in ``output_dir`` and describe them.
    Creation failures are not recovered, no work can proceed without the corpus.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"count must be an integer, got {count!r}")
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DocumentCreationError(f"Cannot create output directory {output_dir}, {e}") from e

    descriptors: List[WorkDescriptor] = []
    for i in tqdm(range(1, count + 1), desc="Creating sample PDFs", disable=not show_progress):
        name = safe_fname(f"sample-document-{i}.pdf")
        content = SAMPLE_TEXTS[(i - 1) % len(SAMPLE_TEXTS)]
        page_count = sample_page_count(i)

        path = pdf_processor.create_document(output_dir / name, content, page_count)
        descriptors.append(WorkDescriptor(name=name, source_path=Path(path), page_count=page_count, content=content))

    logger.info("Created %d sample PDFs in %s", len(descriptors), output_dir)
    return descriptors
