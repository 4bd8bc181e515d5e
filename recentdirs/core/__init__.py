from .entry import (
    Entry, Listing, CommandDescriptor,
    NoAction, ReopenPath, ReopenListing, ReplayCommand, NO_ACTION,
)
from .recency import RecencyList
from .store import PersistenceStore
from .resolver import EntryResolver
from .views import View
from .host import Host
from .loop import EventLoop
from .events import EventEmitter
from .exceptions import RecentDirsError, ConfigError, HistoryCorruptError, HistoryUnreadableError
from .logger import get_logger, get_view_logger, setup_logging

__all__ = [
    "Entry", "Listing", "CommandDescriptor",
    "NoAction", "ReopenPath", "ReopenListing", "ReplayCommand", "NO_ACTION",
    "RecencyList", "PersistenceStore", "EntryResolver",
    "View", "Host", "EventLoop", "EventEmitter",
    "RecentDirsError", "ConfigError", "HistoryCorruptError", "HistoryUnreadableError",
    "get_logger", "get_view_logger", "setup_logging",
]
