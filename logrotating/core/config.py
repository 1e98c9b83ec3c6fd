from __future__ import annotations
from pydantic import BaseModel, Field, ValidationError, field_validator
from platformdirs import user_config_dir, user_log_dir
from pathlib import Path
from typing import Literal, Optional, Union
import json

from .logger import Logger
from .logging_util import get_logger
from .models import Flag, Level, parse_flags, parse_level
from .sink import FileSink, StderrSink, StdoutSink

APP_NAME = "logrotating"
APP_AUTHOR = "logrotating"

log = get_logger("config")


def default_log_file() -> Path:
    return Path(user_log_dir(APP_NAME, APP_AUTHOR)) / "app.log"


class LoggerSettings(BaseModel):
    target: Literal["file", "stderr", "stdout"] = "stderr"
    file: Optional[str] = None  # defaults to default_log_file() when target is "file"
    max_bytes: int = Field(default=0, ge=0)  # 0 disables rotation
    level: Union[int, str] = "info"
    flags: list[str] = Field(default_factory=lambda: ["date", "time", "shortfile"])

    @field_validator("level")
    @classmethod
    def _check_level(cls, v):
        return parse_level(v).name.lower()

    @field_validator("flags")
    @classmethod
    def _check_flags(cls, v):
        parse_flags(v)
        return [f.strip().lower() for f in v]

    def level_value(self) -> Level:
        return parse_level(self.level)

    def flag_value(self) -> Flag:
        return parse_flags(self.flags)


def build_logger(settings: LoggerSettings) -> Logger:
    if settings.target == "file":
        sink = FileSink(settings.file or default_log_file())
        max_bytes = settings.max_bytes
    else:
        sink = StdoutSink() if settings.target == "stdout" else StderrSink()
        max_bytes = 0
    return Logger(sink, max_bytes, settings.flag_value(), settings.level_value())


class Config:
    def __init__(self, config_file: Optional[Path] = None) -> None:
        if config_file is None:
            self.config_dir = Path(user_config_dir(APP_NAME, APP_AUTHOR))
            self.config_file = self.config_dir / "settings.json"
        else:
            self.config_file = Path(config_file)
            self.config_dir = self.config_file.parent
        self.settings = self._load()

    def _load(self) -> LoggerSettings:
        if self.config_file.exists():
            try:
                return LoggerSettings(
                    **json.loads(self.config_file.read_text(encoding="utf-8"))
                )
            except (ValueError, TypeError, ValidationError) as e:
                log.warning("ignoring unreadable settings %s: %s", self.config_file, e)
        return LoggerSettings()

    def save(self, settings: LoggerSettings) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(
            settings.model_dump_json(indent=2), encoding="utf-8"
        )
        self.settings = settings

    def build(self) -> Logger:
        return build_logger(self.settings)
