from __future__ import annotations
from pathlib import Path
from typing import Optional, TextIO
import sys


class Sink:
    """A destination for rendered lines.

    Only file sinks are rotatable; stream sinks are never renamed or reopened.
    """

    rotatable = False
    path = ""

    def write(self, text: str) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass


class FileSink(Sink):
    rotatable = True

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        self._fh: Optional[TextIO] = open(self.path, "a", encoding="utf-8")

    def write(self, text: str) -> None:
        if self._fh is None:
            raise ValueError(f"write to closed log file {self.path}")
        self._fh.write(text)
        # rotation stats the file, so every line must reach the OS
        self._fh.flush()

    def close(self) -> None:
        if self._fh is not None:
            fh, self._fh = self._fh, None
            fh.close()

    @property
    def closed(self) -> bool:
        return self._fh is None

    def __repr__(self) -> str:
        return f"FileSink({self.path!r})"


class StreamSink(Sink):
    """Writes to an already-open text stream; the stream is not owned."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream

    def write(self, text: str) -> None:
        s = self.stream
        s.write(text)
        s.flush()


class StderrSink(StreamSink):
    # resolved on every write so redirected sys.stderr is honoured
    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self) -> TextIO:
        return sys.stderr

    def __repr__(self) -> str:
        return "StderrSink()"


class StdoutSink(StreamSink):
    def __init__(self) -> None:
        super().__init__(sys.stdout)

    @property
    def stream(self) -> TextIO:
        return sys.stdout

    def __repr__(self) -> str:
        return "StdoutSink()"
