"""
Logging: level, file log, timestamp, per-view context.
Configure once with setup_logging(); use get_logger() / get_view_logger() everywhere.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from .config import ENV_LOG_LEVEL, ENV_LOG_DIR

ROOT_NAME = "recentdirs"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_setup_done = False


class RecentDirsFormatter(logging.Formatter):
    """Formatter with timestamp and optional view name; safe when record has no view."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        fmt = fmt or "%(asctime)s [%(levelname)s] %(name)s%(view)s %(message)s"
        super().__init__(fmt=fmt, datefmt=datefmt or _DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        setattr(record, "view", getattr(record, "view", ""))
        return super().format(record)


class ViewAdapter(logging.LoggerAdapter):
    """Logger that adds view context so formatter shows e.g. [*Find*]."""

    def process(self, msg, kwargs):
        extra = kwargs.get("extra") or {}
        view = self.extra.get("view", "")
        extra["view"] = f" [{view}]" if view else ""
        kwargs["extra"] = extra
        return msg, kwargs


def _get_level_from_env() -> int:
    raw = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    return getattr(logging, raw, logging.WARNING)


def _ensure_log_dir(log_dir: Optional[Path]) -> Optional[Path]:
    if log_dir is None:
        log_dir = os.environ.get(ENV_LOG_DIR)
        if log_dir:
            log_dir = Path(log_dir)
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def setup_logging(
    level: Optional[int] = None,
    log_dir: Optional[os.PathLike | str] = None,
    format_string: Optional[str] = None,
    use_console: bool = True,
) -> None:
    """
    Configure recentdirs root logger: level, console handler (stderr), optional file handler.
    Idempotent; safe to call once at startup.
    """
    global _setup_done
    if _setup_done:
        return

    root = logging.getLogger(ROOT_NAME)
    if level is None:
        level = _get_level_from_env()
    root.setLevel(level)

    formatter = RecentDirsFormatter(format_string)

    if use_console:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        root.addHandler(console)

    log_dir = _ensure_log_dir(Path(log_dir) if log_dir else None)
    if log_dir is not None:
        fh = logging.FileHandler(log_dir / "recentdirs.log", encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    _setup_done = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under recentdirs.* (e.g. recentdirs.store)."""
    if not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


def get_view_logger(logger: logging.Logger, view_name: str):
    """
    Return an adapter that adds view context to every log line.
    get_view_logger(get_logger('resolver'), '*Find*') shows [*Find*].
    """
    if isinstance(logger, ViewAdapter):
        logger = logger.logger
    return ViewAdapter(logger, {"view": view_name})
