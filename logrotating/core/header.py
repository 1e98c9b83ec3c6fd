from __future__ import annotations
from datetime import datetime
import re

from .models import Flag, Level

_SEP = re.compile(r"[\\/]")


def short_name(file: str) -> str:
    return _SEP.split(file)[-1]


def format_header(now: datetime, file: str, line: int, level: int, flags: int) -> str:
    """Render the prefix written before every message.

    ``[2024-01-15 09:30:00.123] [server.py:42] ERROR `` for Flag.STD.
    The date/time block and the location block are each optional; the level
    tag is always present.
    """
    parts = []
    if flags & (Flag.DATE | Flag.TIME):
        parts.append("[")
        if flags & Flag.DATE:
            parts.append(f"{now.year:04d}-{now.month:02d}-{now.day:02d}")
        if flags & Flag.TIME:
            parts.append(f" {now.hour:02d}:{now.minute:02d}:{now.second:02d}.{now.microsecond // 1000:03d}")
        parts.append("] ")
    if flags & (Flag.LONGFILE | Flag.SHORTFILE):
        if flags & Flag.SHORTFILE:
            file = short_name(file)
        parts.append(f"[{file}:{line}] ")
    parts.append(Level(level).name)
    parts.append(" ")
    return "".join(parts)
