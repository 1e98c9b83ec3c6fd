"""Leveled, thread-safe logging to a file or standard stream with size-based rotation.

    import logrotating as log

    log.set_file("/var/log/app.log", max_bytes=10_000_000)
    log.info("listening on %s", addr)

Explicit instances are preferred where they can be passed around:

    logger = log.Logger(log.FileSink("app.log"), max_bytes=1 << 20, level="debug")
"""
from .core.models import EmitResult, Flag, Level, LogPanic, Signal, parse_level, passes, raise_for_signal
from .core.sink import FileSink, Sink, StderrSink, StdoutSink, StreamSink
from .core.logger import Logger
from .core.registry import (
    debug,
    error,
    fatal,
    get_default,
    info,
    panic,
    set_default,
    set_file,
    set_flags,
    set_level,
    set_stderr,
    set_stdout,
    warning,
)

__version__ = "0.1.0"

__all__ = [
    "EmitResult",
    "FileSink",
    "Flag",
    "Level",
    "LogPanic",
    "Logger",
    "Signal",
    "Sink",
    "StderrSink",
    "StdoutSink",
    "StreamSink",
    "debug",
    "error",
    "fatal",
    "get_default",
    "info",
    "panic",
    "parse_level",
    "passes",
    "raise_for_signal",
    "set_default",
    "set_file",
    "set_flags",
    "set_level",
    "set_stderr",
    "set_stdout",
    "warning",
]
