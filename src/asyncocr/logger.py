# src/asyncocr/logger.py

import logging
import sys
from pathlib import Path
from queue import Queue
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import Union, Optional

# --- Custom Log Level for Progress ---
PROGRESS = 25
logging.addLevelName(PROGRESS, "PROGRESS")

def progress(self, msg, *args, **kwargs):
    if self.isEnabledFor(PROGRESS):
        self._log(PROGRESS, msg, args, **kwargs)

logging.Logger.progress = progress

# --- Custom Filters ---
class ExcludeLevelFilter(logging.Filter):
    def __init__(self, levelno: int):
        super().__init__()
        self.levelno = levelno
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno != self.levelno

# --- Main Configuration Function ---
def setup_logging(
    log_queue: Queue,
    *,
    level: int = logging.INFO,
    console: bool = True,
    show_progress: bool = False,
    file_path: Optional[Union[str, Path]] = None,
    file_level: Optional[int] = None,
) -> QueueListener:
    """
    Sets up the logging listener architecture.

    Args:
        log_queue: The queue the package logger writes to.
        level: The base logging level for console output.
        console: Whether to echo records to stderr.
        show_progress: Whether PROGRESS records reach the console.
        file_path: Path to the persistent log file.
        file_level: The logging level for the file.

    Returns:
        A QueueListener instance. You must call .start() on it.
    """
    handlers = []

    # File handler
    if file_path:
        fp = Path(file_path)
        fp.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(fp, maxBytes=5*1024*1024, backupCount=2, encoding="utf-8")
        fh.setLevel(file_level if file_level is not None else level)
        fh.setFormatter(logging.Formatter("%(asctime)s | %(threadName)-12s | %(levelname)-8s | %(message)s"))
        fh.addFilter(ExcludeLevelFilter(PROGRESS))
        handlers.append(fh)

    # Console handler, kept on stderr so stdout only carries the report
    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(level)
        ch.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))
        if not show_progress:
            ch.addFilter(ExcludeLevelFilter(PROGRESS))
        handlers.append(ch)

    # The listener pulls from the queue on its own thread and pushes to the configured handlers.
    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    return listener

def configure_logging(log_queue: Queue, level: int = logging.DEBUG) -> logging.Logger:
    """
    Routes the package logger through a QueueHandler.
    Handler I/O then happens on the listener thread, never inside the event loop.
    """
    logger = logging.getLogger("asyncocr")
    logger.setLevel(level)

    # Remove any handlers left over from a previous run
    logger.handlers.clear()

    qh = QueueHandler(log_queue)
    logger.addHandler(qh)
    return logger
