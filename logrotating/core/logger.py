from __future__ import annotations
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union
import os
import sys
import threading

from .header import format_header
from .logging_util import get_logger
from .models import EmitResult, Flag, Level, Signal, parse_level, passes, raise_for_signal
from .rotation import maybe_rotate, retire
from .sink import FileSink, Sink, StderrSink, StdoutSink

log = get_logger("logger")

_SIGNALS = {Level.PANIC: Signal.PANIC, Level.FATAL: Signal.FATAL}


def _caller(depth: int) -> Tuple[str, int]:
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return "???", 0
    return frame.f_code.co_filename, frame.f_lineno


def _render(msg, args) -> str:
    if not args:
        return str(msg)
    try:
        return str(msg) % args
    except (TypeError, ValueError) as e:
        log.warning("bad format %r with args %r: %s", msg, args, e)
        return " ".join([str(msg)] + [str(a) for a in args])


class Logger:
    """Leveled logger writing to a single sink, rotating file sinks by size.

    Every state change and every write happens under ``self.lock``; a call
    only gives the lock up while it looks up its caller's file and line.
    """

    def __init__(
        self,
        sink: Optional[Sink] = None,
        max_bytes: int = 0,
        flags: int = Flag.STD,
        level: Union[Level, int, str] = Level.INFO,
    ) -> None:
        if max_bytes < 0:
            raise ValueError("max_bytes must be >= 0")
        self.lock = threading.Lock()
        self.sink: Sink = sink if sink is not None else StderrSink()
        self.max_bytes = max_bytes
        self.flags = Flag(flags)
        self.level = parse_level(level)

    @property
    def file(self) -> str:
        return self.sink.path if self.sink.rotatable else ""

    # ---- configuration -------------------------------------------------

    def set_level(self, level: Union[Level, int, str]) -> None:
        level = parse_level(level)
        with self.lock:
            self.level = level

    def set_flags(self, flags: int) -> None:
        with self.lock:
            self.flags = Flag(flags)

    def set_file(self, path: Union[str, Path], max_bytes: int = 0) -> None:
        if max_bytes < 0:
            raise ValueError("max_bytes must be >= 0")
        with self.lock:
            old = self.sink
            if old.rotatable and os.path.abspath(old.path) == os.path.abspath(str(path)):
                retire(old, datetime.now())
                try:
                    self.sink = FileSink(path)
                except OSError:
                    log.warning("reopening %s failed, falling back to stderr", old.path)
                    self.sink = StderrSink()
                    self.max_bytes = 0
                    raise
            else:
                # a path that cannot be opened leaves the current sink in place
                fresh = FileSink(path)
                self._retire_current()
                self.sink = fresh
            self.max_bytes = max_bytes

    def set_stderr(self) -> None:
        with self.lock:
            self._retire_current()
            self.sink = StderrSink()
            self.max_bytes = 0

    def set_stdout(self) -> None:
        with self.lock:
            self._retire_current()
            self.sink = StdoutSink()
            self.max_bytes = 0

    def close(self) -> None:
        with self.lock:
            self.sink.close()

    def _retire_current(self) -> None:
        if self.sink.rotatable:
            retire(self.sink, datetime.now())

    # ---- write path ----------------------------------------------------

    def emit(self, level: Union[Level, int], text: str, calldepth: int = 1) -> Optional[EmitResult]:
        """Write ``text`` at ``level``. Returns None when the level is filtered out.

        ``calldepth`` counts frames above emit() to the call site reported in
        the header.
        """
        if not passes(level, self.level):
            return None
        return self._output(calldepth + 1, Level(level), text)

    def _log(self, calldepth: int, level: Level, msg, args) -> Optional[EmitResult]:
        if not passes(level, self.level):
            return None
        return self._output(calldepth + 1, level, _render(msg, args))

    def _output(self, calldepth: int, level: Level, text: str) -> EmitResult:
        now = datetime.now()
        file, line = "???", 0
        self.lock.acquire()
        try:
            if self.flags & (Flag.LONGFILE | Flag.SHORTFILE):
                # the stack walk is slow; let other callers through meanwhile
                self.lock.release()
                try:
                    file, line = _caller(calldepth)
                finally:
                    self.lock.acquire()
            flags = self.flags
            buf = format_header(now, file, line, level, flags) + text.rstrip("\n") + "\n"

            fresh = maybe_rotate(self.sink, self.max_bytes, now)
            if fresh is not None:
                self.sink = fresh

            err = None
            try:
                self.sink.write(buf)
            except (OSError, ValueError) as e:
                err = e
            if flags & Flag.MIRROR_STDERR:
                m = self._mirror(sys.stderr, buf)
                err = err or m
            if flags & Flag.MIRROR_STDOUT:
                m = self._mirror(sys.stdout, buf)
                err = err or m
        finally:
            self.lock.release()
        return EmitResult(buf, err, _SIGNALS.get(level, Signal.NONE))

    @staticmethod
    def _mirror(stream, buf: str) -> Optional[Exception]:
        try:
            stream.write(buf)
            stream.flush()
        except (OSError, ValueError) as e:
            return e
        return None

    # ---- severity helpers ------------------------------------------------

    def _abort(self, calldepth: int, level: Level, msg, args) -> None:
        result = self._log(calldepth + 1, level, msg, args)
        if result is None:
            # filtered out, but a panic or fatal call still never returns
            result = EmitResult(_render(msg, args) + "\n", None, _SIGNALS[level])
        raise_for_signal(result)

    def panic(self, msg, *args) -> None:
        """Log at PANIC, then raise LogPanic carrying the written line."""
        self._abort(2, Level.PANIC, msg, args)

    def fatal(self, msg, *args) -> None:
        """Log at FATAL, then exit the process with status 1 without cleanup."""
        self._abort(2, Level.FATAL, msg, args)

    def error(self, msg, *args) -> Optional[EmitResult]:
        return self._log(2, Level.ERROR, msg, args)

    def warning(self, msg, *args) -> Optional[EmitResult]:
        return self._log(2, Level.WARNING, msg, args)

    warn = warning

    def info(self, msg, *args) -> Optional[EmitResult]:
        return self._log(2, Level.INFO, msg, args)

    def debug(self, msg, *args) -> Optional[EmitResult]:
        return self._log(2, Level.DEBUG, msg, args)

    def __repr__(self) -> str:
        return f"Logger(sink={self.sink!r}, max_bytes={self.max_bytes}, level={self.level.name})"
