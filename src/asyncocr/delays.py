# src/asyncocr/delays.py
"""
Simulated latency sources for the OCR stages.

Providers return seconds. The processor awaits them with ``asyncio.sleep`` so a
delay only suspends the task that asked for it.
"""
from __future__ import annotations

import random
import threading
from abc import ABC, abstractmethod
from typing import Optional, Tuple


class DelayProvider(ABC):
    """Source of per-stage delays, in seconds."""

    @abstractmethod
    def metadata_delay(self) -> float:
        """Delay standing in for reading the document metadata."""
        raise NotImplementedError

    @abstractmethod
    def ocr_delay(self) -> float:
        """Delay standing in for OCR engine startup and bulk processing."""
        raise NotImplementedError

    @abstractmethod
    def page_delay(self) -> float:
        """Delay standing in for the extraction of a single page."""
        raise NotImplementedError


class RandomDelayProvider(DelayProvider):
    """
    Uniform random delays drawn from millisecond ranges ``[low, high)``.

    One ``random.Random`` instance is shared by every caller, access to it is
    serialized with a lock.
    """

    def __init__(
        self,
        metadata_ms: Tuple[int, int] = (50, 150),
        ocr_ms: Tuple[int, int] = (300, 700),
        page_ms: Tuple[int, int] = (100, 300),
        seed: Optional[int] = None,
    ):
        self.metadata_ms = metadata_ms
        self.ocr_ms = ocr_ms
        self.page_ms = page_ms
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def _draw(self, bounds: Tuple[int, int]) -> float:
        low, high = bounds
        with self._lock:
            ms = low + self._rng.random() * (high - low)
        return ms / 1000.0

    def metadata_delay(self) -> float:
        return self._draw(self.metadata_ms)

    def ocr_delay(self) -> float:
        return self._draw(self.ocr_ms)

    def page_delay(self) -> float:
        return self._draw(self.page_ms)

    @classmethod
    def from_config(cls, config) -> "RandomDelayProvider":
        return cls(
            metadata_ms=config.metadata_delay_ms,
            ocr_ms=config.ocr_delay_ms,
            page_ms=config.page_delay_ms,
            seed=config.seed,
        )


class FixedDelayProvider(DelayProvider):
    """Constant delays, for deterministic timing."""

    def __init__(self, metadata: float = 0.0, ocr: float = 0.0, page: float = 0.0):
        self.metadata = metadata
        self.ocr = ocr
        self.page = page

    def metadata_delay(self) -> float:
        return self.metadata

    def ocr_delay(self) -> float:
        return self.ocr

    def page_delay(self) -> float:
        return self.page


class ZeroDelayProvider(FixedDelayProvider):
    """No latency at all. Every stage still yields to the event loop once."""

    def __init__(self):
        super().__init__(0.0, 0.0, 0.0)
