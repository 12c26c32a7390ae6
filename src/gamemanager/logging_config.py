"""Console and file logging for the registry."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER_NAME = "gamemanager"

_HANDLER_MARK = "_gamemanager_handler"


def configure_logging(log_path: Path | str | None, *, level: int = logging.INFO) -> logging.Logger:
    """Attach console and file handlers to the package logger.

    Safe to call repeatedly; previously attached handlers are replaced. If
    the log file cannot be opened, logging continues on the console only.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    setattr(console, _HANDLER_MARK, True)
    root.addHandler(console)

    if log_path is not None:
        path = Path(log_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as exc:
            root.warning("Unable to open log file %s: %s; logging to console only", path, exc)
        else:
            file_handler.setFormatter(formatter)
            setattr(file_handler, _HANDLER_MARK, True)
            root.addHandler(file_handler)

    return root
