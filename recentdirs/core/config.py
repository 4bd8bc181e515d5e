"""
Package constants. No config loading here (see recentdirs/config).
Env names, default file locations, persisted action tags.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------
ENV_CONFIG = "RECENTDIRS_CONFIG"
ENV_HISTORY_FILE = "RECENTDIRS_HISTORY_FILE"
ENV_LOG_LEVEL = "RECENTDIRS_LOG_LEVEL"
ENV_LOG_DIR = "RECENTDIRS_LOG_DIR"

# ---------------------------------------------------------------------------
# Host event names
# ---------------------------------------------------------------------------
EVENT_VIEW_OPENED = "view_opened"
EVENT_SHUTDOWN = "shutdown"

# ---------------------------------------------------------------------------
# Persisted action tags
# ---------------------------------------------------------------------------
ACTION_PATH = "path"
ACTION_LISTING = "listing"

# Name the host gives to its asynchronous search-results view
DEFAULT_SEARCH_VIEW_NAMES = ("*Find*",)

STATE_FILE = "state.json"


def default_data_dir() -> Path:
    """Per-user app-data directory ($XDG_DATA_HOME/recentdirs)."""
    base = os.environ.get("XDG_DATA_HOME") or os.path.expanduser("~/.local/share")
    return Path(base) / "recentdirs"


def default_history_file() -> Path:
    return default_data_dir() / "history.json"
