from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag
from typing import Optional, Union
import os


class Level(IntEnum):
    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5


class Flag(IntFlag):
    DATE = 1            # 2009-01-23
    TIME = 2            # 01:23:23.456
    LONGFILE = 4        # /a/b/c/d.py:23
    SHORTFILE = 8       # d.py:23, overrides LONGFILE
    MIRROR_STDERR = 16
    MIRROR_STDOUT = 32
    STD = DATE | TIME | SHORTFILE


class Signal(str, Enum):
    NONE = "none"
    PANIC = "panic"
    FATAL = "fatal"


_ALIASES = {"warn": Level.WARNING, "critical": Level.FATAL}


def parse_level(value: Union[Level, int, str]) -> Level:
    """Accept a Level, its integer value, or a case-insensitive name."""
    if isinstance(value, str):
        name = value.strip().lower()
        if name in _ALIASES:
            return _ALIASES[name]
        try:
            return Level[name.upper()]
        except KeyError:
            raise ValueError(f"unknown log level: {value!r}") from None
    try:
        return Level(int(value))
    except ValueError:
        raise ValueError(f"log level out of range: {value!r}") from None


def parse_flags(names) -> Flag:
    flags = Flag(0)
    for n in names:
        try:
            flags |= Flag[n.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown flag: {n!r}") from None
    return flags


def passes(message_level: int, threshold: int) -> bool:
    """Lower values are more severe; a message passes when it is at least as severe as the threshold."""
    return message_level <= threshold


class LogPanic(Exception):
    def __init__(self, text: str) -> None:
        super().__init__(text.rstrip("\n"))
        self.text = text


@dataclass
class EmitResult:
    text: str
    error: Optional[Exception] = None
    signal: Signal = Signal.NONE


def raise_for_signal(result: Optional[EmitResult]) -> Optional[EmitResult]:
    """Turn a panic/fatal result into an unwind or a process exit."""
    if result is None or result.signal is Signal.NONE:
        return result
    if result.signal is Signal.PANIC:
        raise LogPanic(result.text)
    os._exit(1)
