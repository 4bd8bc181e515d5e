"""
Turn an opened View into a storable Entry.

Process-backed views are registered in two phases: a placeholder entry that reopens the
working directory now, and the replay command once the host has installed it (next loop turn).
"""
import os
from typing import Callable, Iterable, Optional

from recentdirs.utils.file_utils import abbreviate_home

from .entry import Entry, ReopenListing, ReopenPath, ReplayCommand, RestoreAction
from .logger import get_logger, get_view_logger
from .loop import EventLoop
from .views import View

logger = get_logger("resolver")

CaptureCallback = Callable[[str, RestoreAction], None]


def listing_label(name: str) -> str:
    """Base name of a listing's name; falls back to the name itself for roots."""
    return os.path.basename(name.rstrip("/\\")) or name


def process_label(view: View) -> str:
    return f"{view.name}:{abbreviate_home(view.directory)}"


class EntryResolver:
    def __init__(self, loop: EventLoop, ignored_prefixes: Iterable[str] = ()):
        self.loop = loop
        self.ignored_prefixes = tuple(p for p in ignored_prefixes if p)

    def is_ignored(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.ignored_prefixes)

    def resolve(self, view: View, on_capture: Optional[CaptureCallback] = None) -> Optional[Entry]:
        """
        Entry for view, or None when its location is ignored.
        For process-backed views, on_capture(label, ReplayCommand) is called on the next loop turn.
        """
        if view.is_process_backed:
            path = view.directory
        elif view.listing is not None:
            path = view.listing.name
        else:
            path = view.directory
        if self.is_ignored(path):
            logger.debug("Ignoring %s", path)
            return None

        if view.is_process_backed:
            label = process_label(view)
            if on_capture is not None:
                self.loop.call_soon(self._capture, view, label, on_capture)
            return Entry(label, ReopenPath(view.directory))
        if view.listing is not None:
            return Entry(listing_label(view.listing.name), ReopenListing(view.listing))
        return Entry.plain(view.directory)

    def _capture(self, view: View, label: str, on_capture: CaptureCallback) -> None:
        log = get_view_logger(logger, view.name)
        if view.reload_command is None:
            log.debug("No reload command installed; keeping directory placeholder")
            return
        log.debug("Captured reload command: %s", view.reload_command)
        on_capture(label, ReplayCommand(view.reload_command))
