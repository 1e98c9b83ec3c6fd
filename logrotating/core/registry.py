from __future__ import annotations
from pathlib import Path
from typing import Union
import threading

from .logger import Logger
from .models import Level

_lock = threading.Lock()
_std = Logger()


def get_default() -> Logger:
    with _lock:
        return _std


def set_default(logger: Logger) -> Logger:
    """Replace the process-wide logger. Returns the previous one."""
    global _std
    if not isinstance(logger, Logger):
        raise TypeError(f"expected Logger, got {type(logger).__name__}")
    with _lock:
        old, _std = _std, logger
    return old


def set_level(level: Union[Level, int, str]) -> None:
    get_default().set_level(level)


def set_flags(flags: int) -> None:
    get_default().set_flags(flags)


def set_file(path: Union[str, Path], max_bytes: int = 0) -> None:
    get_default().set_file(path, max_bytes)


def set_stderr() -> None:
    get_default().set_stderr()


def set_stdout() -> None:
    get_default().set_stdout()


# Write errors are dropped here; use a Logger instance to see them.

def panic(msg, *args) -> None:
    get_default()._abort(2, Level.PANIC, msg, args)


def fatal(msg, *args) -> None:
    get_default()._abort(2, Level.FATAL, msg, args)


def error(msg, *args) -> None:
    get_default()._log(2, Level.ERROR, msg, args)


def warning(msg, *args) -> None:
    get_default()._log(2, Level.WARNING, msg, args)


def info(msg, *args) -> None:
    get_default()._log(2, Level.INFO, msg, args)


def debug(msg, *args) -> None:
    get_default()._log(2, Level.DEBUG, msg, args)
