# src/asyncocr/utils.py
from __future__ import annotations

import asyncio
import logging
import threading

from slugify import slugify

logger = logging.getLogger("asyncocr")


def safe_fname(name: str, fallback: str = "file") -> str:
    """
    Create a filesystem safe name, preserve extension when present.
    """
    name = (name or "").strip() or fallback
    if "." in name:
        base, ext = name.rsplit(".", 1)
        return f"{slugify(base)[:100] or fallback}.{ext}"
    return slugify(name)[:100] or fallback


def current_worker_id() -> str:
    """
    Identify the logical worker running the caller.
    Inside an event loop this is the asyncio task name plus the thread id,
    outside of one it is only the thread id.
    """
    thread_id = threading.get_ident()
    try:
        task = asyncio.current_task()
    except RuntimeError:
        task = None
    if task is None:
        return f"thread-{thread_id}"
    return f"{task.get_name()}@{thread_id}"
