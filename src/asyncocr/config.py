# asyncocr/config.py
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import List, Tuple, Dict, Any, Optional
import tempfile


DEFAULT_STRATEGIES = ["sequential", "concurrent", "concurrent_progress"]


def _as_range(value) -> Tuple[int, int]:
    low, high = value
    return int(low), int(high)


@dataclass
class BenchConfig:
    """Configuration for an asyncOCR benchmark run."""
    output_dir: Path = Path(tempfile.gettempdir()) / "asyncOCR_samples"
    sample_count: int = 5
    seed: Optional[int] = None

    # Simulated latencies, inclusive-exclusive millisecond ranges
    metadata_delay_ms: Tuple[int, int] = (50, 150)
    ocr_delay_ms: Tuple[int, int] = (300, 700)
    page_delay_ms: Tuple[int, int] = (100, 300)

    strategies: List[str] = field(default_factory=lambda: list(DEFAULT_STRATEGIES))
    pdf_engine: str = "pymupdf"

    results_path: Optional[Path] = None
    log_performance: bool = False
    performance_log_path: Optional[Path] = None

    show_progress: bool = True

    def validate(self) -> "BenchConfig":
        if isinstance(self.sample_count, bool) or not isinstance(self.sample_count, int):
            raise ValueError(f"sample_count must be an integer, got {self.sample_count!r}")
        if self.sample_count < 0:
            raise ValueError(f"sample_count must be non-negative, got {self.sample_count}")

        for key in ("metadata_delay_ms", "ocr_delay_ms", "page_delay_ms"):
            low, high = getattr(self, key)
            if low < 0 or high < low:
                raise ValueError(f"{key} must be a non-negative (low, high) range, got {(low, high)}")

        from .parallel import get_strategy  # local import to avoid import cycles
        for name in self.strategies:
            get_strategy(name)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Converts config to a JSON friendly dictionary."""
        d = asdict(self)
        for key, value in d.items():
            if isinstance(value, Path):
                d[key] = str(value)
            elif isinstance(value, tuple):
                d[key] = list(value)
        return d

    @classmethod
    def from_dict(cls, config_dict: dict):
        d = dict(config_dict)

        # normalize path-like fields
        for key in ["output_dir", "results_path", "performance_log_path"]:
            if key in d and isinstance(d[key], str):
                d[key] = Path(d[key])

        for key in ["metadata_delay_ms", "ocr_delay_ms", "page_delay_ms"]:
            if d.get(key) is not None:
                d[key] = _as_range(d[key])

        # allow explicit None to mean use default
        for key in ["output_dir", "sample_count", "strategies", "pdf_engine",
                    "metadata_delay_ms", "ocr_delay_ms", "page_delay_ms"]:
            if d.get(key) is None:
                d.pop(key, None)

        cfg = cls(**d)

        # if logging is on but no path was provided, pick one next to the samples
        if cfg.log_performance and not cfg.performance_log_path:
            cfg.performance_log_path = cfg.output_dir / "asyncocr_performance_log.jsonl"

        return cfg
