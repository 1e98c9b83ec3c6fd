from __future__ import annotations
from datetime import datetime
from typing import Optional
import os

from .sink import FileSink, Sink
from .logging_util import get_logger

log = get_logger("rotation")


def rotated_name(path: str, now: datetime) -> str:
    """``<path>.<unix seconds>``; a numeric suffix is added if that name is taken."""
    base = f"{path}.{int(now.timestamp())}"
    name, n = base, 1
    while os.path.exists(name):
        name = f"{base}.{n}"
        n += 1
    return name


def retire(sink: FileSink, now: datetime) -> Optional[str]:
    """Close a file sink and move it aside. Returns the new name, or None on failure."""
    try:
        sink.close()
    except OSError as e:
        log.warning("closing %s failed: %s", sink.path, e)
    target = rotated_name(sink.path, now)
    try:
        os.rename(sink.path, target)
    except OSError as e:
        log.warning("renaming %s -> %s failed: %s", sink.path, target, e)
        return None
    return target


def maybe_rotate(sink: Sink, max_bytes: int, now: datetime) -> Optional[FileSink]:
    """Rotate ``sink`` once its file has grown to ``max_bytes``.

    Returns the replacement sink when a rotation happened, otherwise None.
    Errors never propagate: a failed stat skips the check, a failed rename
    reopens the original path so writes keep going somewhere.
    """
    if max_bytes <= 0 or not sink.rotatable:
        return None
    try:
        size = os.stat(sink.path).st_size
    except OSError:
        return None
    if size < max_bytes:
        return None

    rotated = retire(sink, now)
    try:
        fresh = FileSink(sink.path)
    except OSError as e:
        log.warning("reopening %s after rotation failed: %s", sink.path, e)
        return None
    if rotated:
        log.debug("rotated %s (%d bytes) to %s", sink.path, size, rotated)
    return fresh
