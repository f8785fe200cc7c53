# src/asyncocr/__init__.py
from .logger import PROGRESS
from .config import BenchConfig
from .models import ProcessingResult, RunSummary, WorkDescriptor
from .parallel import BenchmarkRunner, StrategyRun, get_strategy

__all__ = [
    "PROGRESS",
    "BenchConfig",
    "BenchmarkRunner",
    "ProcessingResult",
    "RunSummary",
    "StrategyRun",
    "WorkDescriptor",
    "get_strategy",
]

__version__ = "1.0.0"
