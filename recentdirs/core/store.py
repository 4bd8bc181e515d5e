"""
History file persistence: JSON array of entries.
Plain entries are strings; others are {"label": ..., "action": {"type": ...}}.
Replayed commands are saved as their working directory (a live command does not survive a restart).
"""
import json
import os
from pathlib import Path

from recentdirs.utils.file_utils import atomic_write_text, is_remote

from .config import ACTION_LISTING, ACTION_PATH
from .entry import Entry, Listing, ReopenListing, ReopenPath, ReplayCommand
from .exceptions import HistoryCorruptError, HistoryUnreadableError
from .logger import get_logger
from .recency import RecencyList

logger = get_logger("store")


def encode_entry(entry: Entry):
    action = entry.action
    if isinstance(action, ReopenListing):
        return {
            "label": entry.label,
            "action": {"type": ACTION_LISTING, "name": action.listing.name, "files": list(action.listing.files)},
        }
    if isinstance(action, (ReopenPath, ReplayCommand)):
        return {"label": entry.label, "action": {"type": ACTION_PATH, "path": entry.path}}
    return entry.label


def _is_str_list(value) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def decode_entry(item) -> Entry:
    """Decode one persisted element. Raises ValueError on anything unexpected."""
    if isinstance(item, str):
        return Entry.plain(item)
    if not isinstance(item, dict):
        raise ValueError(f"entry must be a string or object, got {type(item).__name__}")
    label = item.get("label")
    action = item.get("action")
    if not isinstance(label, str) or not isinstance(action, dict):
        raise ValueError("entry object needs a string 'label' and an object 'action'")
    kind = action.get("type")
    if kind == ACTION_PATH and isinstance(action.get("path"), str):
        return Entry(label, ReopenPath(action["path"]))
    if kind == ACTION_LISTING and isinstance(action.get("name"), str) and _is_str_list(action.get("files")):
        return Entry(label, ReopenListing(Listing(action["name"], action["files"])))
    raise ValueError(f"unknown or incomplete action {action!r}")


def _keep(entry: Entry) -> bool:
    path = entry.path
    if is_remote(path):
        return True
    if os.path.isdir(path):
        return True
    logger.debug("Dropping missing directory %s", path)
    return False


class PersistenceStore:
    """Reads and writes one history file."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def load(self, recency: RecencyList) -> bool:
        """
        Replace recency's contents with the file's. Missing file: no-op, returns False.
        Raises HistoryUnreadableError if the file exists but cannot be read, and
        HistoryCorruptError on malformed content; recency is left untouched in both cases.
        """
        if not self.path.exists():
            logger.debug("No history file at %s", self.path)
            return False
        try:
            raw = self._read()
        except OSError as e:
            raise HistoryUnreadableError(self.path, str(e)) from e
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise HistoryCorruptError(self.path, str(e)) from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise HistoryCorruptError(self.path, str(e)) from e
        if not isinstance(data, list):
            raise HistoryCorruptError(self.path, "top level must be a JSON array")
        try:
            loaded = RecencyList(decode_entry(item) for item in data)
        except ValueError as e:
            raise HistoryCorruptError(self.path, str(e)) from e
        recency.replace(loaded)
        logger.info("Loaded %d entries from %s", len(recency), self.path)
        return True

    def _read(self) -> bytes:
        return self.path.read_bytes()

    def save(self, recency: RecencyList) -> None:
        payload = [encode_entry(e) for e in recency]
        atomic_write_text(self.path, json.dumps(payload, ensure_ascii=False, indent=2) + "\n")
        logger.info("Saved %d entries to %s", len(payload), self.path)

    def cleanup(self, recency: RecencyList) -> RecencyList:
        """Keep remote entries and existing local directories. Returns the filtered list."""
        kept = recency.filter(_keep)
        dropped = len(recency) - len(kept)
        if dropped:
            logger.info("Cleanup dropped %d missing entries", dropped)
        return kept
