from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from envload.bindings import Slot
from envload.loader import Loader

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


class FileLoggingSettings(BaseModel):
    """
    Daily rotating log file.

    Maps onto the standard library TimedRotatingFileHandler.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    backup_count: int = 5

    @field_validator("backup_count")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("backup_count must be >= 0")
        return value


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: LogLevel = "INFO"
    file: Optional[FileLoggingSettings] = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_loader(cls, loader: Loader) -> "LoggingSettings":
        """
        Read LOG_LEVEL, LOG_FILE and LOG_BACKUP_COUNT from the loader's source.

        The variables are resolved on a fresh view with the same prefix, so
        bindings already registered on `loader` are left alone.
        """
        env = loader.prefix("")
        level: Slot[str] = Slot()
        path: Slot[str] = Slot()
        backup_count: Slot[int] = Slot()
        env.optional_string("LOG_LEVEL", level, "INFO", "log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
        env.optional_string("LOG_FILE", path, "", "path of a daily rotating log file; empty disables file logging")
        env.optional_int("LOG_BACKUP_COUNT", backup_count, 5, "number of rotated log files to keep")
        env.load()

        file_settings = None
        if path.value:
            file_settings = FileLoggingSettings(path=path.value, backup_count=backup_count.value)
        return cls(level=level.value, file=file_settings)
