from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from envload.settings import LoggingSettings

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_installed: list[logging.Handler] = []


def init_logging(settings: LoggingSettings) -> None:
    """Configure the root logger. Repeated calls replace the handlers installed earlier."""
    root = logging.getLogger()
    for handler in _installed:
        root.removeHandler(handler)
        handler.close()
    _installed.clear()

    formatter = logging.Formatter(_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    _installed.append(stream_handler)

    if settings.file is not None:
        log_path = Path(settings.file.path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_path,
            when="midnight",
            backupCount=settings.file.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        _installed.append(file_handler)

    for handler in _installed:
        root.addHandler(handler)
    root.setLevel(settings.level)
    logging.getLogger(__name__).debug(
        "logging.initialized level=%s file=%s",
        settings.level,
        settings.file.path if settings.file else None,
    )
