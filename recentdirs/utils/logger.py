"""
Logging setup for recentdirs front ends.

Use configure_logging() at startup (CLI or embedding host).
Then use get_logger(name) or get_view_logger(logger, view_name) everywhere.
"""

import logging
from pathlib import Path
from typing import Optional

from recentdirs.core.logger import (
    get_logger,
    get_view_logger,
    setup_logging as _setup_logging,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_view_logger",
]


def configure_logging(
    level: Optional[str] = None,
    log_dir: Optional[Path] = None,
    use_console: bool = True,
) -> None:
    """
    Configure application-wide logging. Call once at startup.

    Args:
        level: One of DEBUG, INFO, WARNING, ERROR. Default from RECENTDIRS_LOG_LEVEL or WARNING.
        log_dir: Directory for recentdirs.log. Default from RECENTDIRS_LOG_DIR or console only.
        use_console: Whether to attach a console handler.
    """
    level_int = None
    if level is not None:
        level_int = getattr(logging, level.upper(), logging.WARNING)
    _setup_logging(
        level=level_int,
        log_dir=str(log_dir) if log_dir else None,
        use_console=use_console,
    )
