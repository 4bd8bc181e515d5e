"""
Feature toggle persistence for front ends that start fresh on every run (the CLI).
Stores {"enabled": bool} in state.json next to the history file.
"""
import json
from pathlib import Path

from recentdirs.utils.file_utils import atomic_write_text

from .config import STATE_FILE
from .logger import get_logger

logger = get_logger("state")

DEFAULT_STATE = {"enabled": True}


def _state_path(data_dir):
    return Path(data_dir) / STATE_FILE


def load_state(data_dir):
    p = _state_path(data_dir)
    if p.exists():
        try:
            with open(p, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                return {"enabled": bool(data.get("enabled", DEFAULT_STATE["enabled"]))}
            logger.warning("Ignoring malformed state file %s", p)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Cannot read state file %s: %s", p, e)
    return dict(DEFAULT_STATE)


def save_state(data_dir, state_dict):
    atomic_write_text(_state_path(data_dir), json.dumps(state_dict, indent=2) + "\n")


def is_enabled(data_dir):
    return load_state(data_dir)["enabled"]


def set_enabled(data_dir, enabled):
    s = load_state(data_dir)
    s["enabled"] = bool(enabled)
    save_state(data_dir, s)
