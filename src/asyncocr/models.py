# asyncocr/models.py
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Any

ERROR_MARKER = "Error: "


@dataclass(frozen=True)
class WorkDescriptor:
    """Represents a single generated document to be processed."""
    name: str
    source_path: Path
    page_count: int
    content: str


@dataclass
class ProcessingResult:
    """The outcome of simulated OCR on one document, successful or failed."""
    file_name: str
    extracted_text: str
    page_count: int
    processing_seconds: float
    worker_id: str
    processed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_error(self) -> bool:
        return self.extracted_text.startswith(ERROR_MARKER)

    @property
    def text_length(self) -> int:
        return len(self.extracted_text)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["processed_at"] = self.processed_at.isoformat()
        d["is_error"] = self.is_error
        return d


@dataclass(frozen=True)
class RunSummary:
    """Aggregate statistics for one strategy run over a corpus."""
    strategy: str
    wall_seconds: float
    total_characters: int
    total_pages: int
    item_count: int
    error_count: int = 0

    @property
    def average_seconds_per_item(self) -> float:
        if self.item_count == 0:
            return 0.0
        return self.wall_seconds / self.item_count

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["average_seconds_per_item"] = round(self.average_seconds_per_item, 4)
        d["wall_seconds"] = round(self.wall_seconds, 4)
        return d
