# src/tasklift/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable during a migration run:
    - allow all tasklift logs
    - httpx/httpcore log one line per request; only WARNING+ from them
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - suppress other third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "tasklift" or name.startswith("tasklift."):
            return True

        if name.startswith("httpx") or name.startswith("httpcore"):
            return record.levelno >= logging.WARNING

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasklift",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure logging with:
    - Console handler: readable + filtered
    - File handler: full logs (every attachment fetch) for post-mortem of a failed run

    Call this ONCE from the embedding application, before the first migration.
    Library modules only create loggers; they never configure handlers.
    Returns the path of the log file.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "tasklift.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    return log_file


def level_from_name(name: str | None, default: int = logging.INFO) -> int:
    """Map a settings log level ("debug", "INFO", ...) to a logging constant."""
    level = getattr(logging, str(name or "").strip().upper(), None)
    return level if isinstance(level, int) else default


def setup_logging_from_settings(settings) -> Path:
    """setup_logging() driven by Settings.log_level / Settings.log_dir."""
    log_file = setup_logging(
        log_dir=getattr(settings, "log_dir", ".local/tasklift"),
        console_level=level_from_name(getattr(settings, "log_level", "INFO")),
    )
    # keep noisy libs readable in the file log as well
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return log_file
