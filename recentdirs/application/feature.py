"""
Feature object owning the MRU list: enable/disable lifecycle, host hook wiring,
and the list operations front ends expose (load, save, cleanup, record, remove).
"""
from pathlib import Path
from typing import Iterable, Optional

from recentdirs.core.config import EVENT_SHUTDOWN, EVENT_VIEW_OPENED
from recentdirs.core.entry import Entry, RestoreAction
from recentdirs.core.exceptions import HistoryUnreadableError
from recentdirs.core.host import Host
from recentdirs.core.logger import get_logger
from recentdirs.core.recency import RecencyList
from recentdirs.core.resolver import EntryResolver
from recentdirs.core.store import PersistenceStore
from recentdirs.core.views import View

from .state_machine import FeatureState, StateMachine

logger = get_logger("feature")


class RecentDirs:
    """
    Single owner of the RecencyList. The list stays None until first loaded, and an
    existing history file that could not be read is never overwritten.
    """

    def __init__(
        self,
        host: Host,
        history_file,
        ignored_prefixes: Iterable[str] = (),
        max_entries: Optional[int] = None,
    ):
        self.host = host
        self.store = PersistenceStore(history_file)
        self.resolver = EntryResolver(host.loop, ignored_prefixes)
        self.max_entries = max_entries
        self.recency: Optional[RecencyList] = None
        self._unreadable = False
        self.machine = StateMachine()
        self._hooks = [
            (EVENT_VIEW_OPENED, self._on_view_opened),
            (EVENT_SHUTDOWN, self._on_shutdown),
        ]

    @classmethod
    def from_config(cls, host: Host, cfg: dict) -> "RecentDirs":
        return cls(
            host,
            cfg["history_file_path"],
            ignored_prefixes=cfg.get("ignored_prefixes") or (),
            max_entries=cfg.get("max_entries"),
        )

    @property
    def history_file(self) -> Path:
        return self.store.path

    @property
    def enabled(self) -> bool:
        return self.machine.state is FeatureState.ENABLED

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def enable(self) -> None:
        """Load the history and start recording opened views."""
        if self.enabled:
            return
        self.load_list()
        for event_name, hook in self._hooks:
            self.host.events.on(event_name, hook)
        self.machine.set_state(FeatureState.ENABLED)
        logger.info("Enabled with %d entries", len(self.recency))

    def disable(self) -> None:
        """Stop recording and persist the history."""
        if not self.enabled:
            return
        for event_name, hook in self._hooks:
            self.host.events.off(event_name, hook)
        self.save_list()
        self.machine.set_state(FeatureState.DISABLED)
        logger.info("Disabled")

    def _on_view_opened(self, view: View) -> None:
        self.record(view)

    def _on_shutdown(self) -> None:
        self.save_list()

    # ------------------------------------------------------------------
    # List operations
    # ------------------------------------------------------------------

    def ensure_loaded(self) -> RecencyList:
        if self.recency is None:
            self.load_list()
        return self.recency

    def load_list(self) -> RecencyList:
        """Replace the in-memory list with the file's; a missing file leaves it as is."""
        target = self.recency if self.recency is not None else RecencyList()
        try:
            self.store.load(target)
        except HistoryUnreadableError as e:
            logger.warning("%s; treating history as empty and not saving over it", e)
            self._unreadable = True
        else:
            self._unreadable = False
        self.recency = target
        return self.recency

    def save_list(self) -> bool:
        """Write the list to disk. Returns False when the existing file was unreadable."""
        recency = self.ensure_loaded()
        if self._unreadable:
            logger.warning("Not saving: %s could not be read", self.history_file)
            return False
        self.store.save(recency)
        return True

    def cleanup(self) -> int:
        """Drop local entries whose directory is gone. Returns how many were dropped."""
        recency = self.ensure_loaded()
        kept = self.store.cleanup(recency)
        dropped = len(recency) - len(kept)
        recency.replace(kept)
        return dropped

    def record(self, view: View) -> Optional[Entry]:
        """Insert an entry for view at the front of the list (None if ignored)."""
        recency = self.ensure_loaded()
        entry = self.resolver.resolve(view, on_capture=self._capture)
        if entry is None:
            return None
        recency.insert(entry, self.max_entries)
        logger.debug("Recorded %s", entry.label)
        return entry

    def _capture(self, label: str, action: RestoreAction) -> None:
        if self.recency is not None and self.recency.set_action(label, action):
            logger.debug("Restore action for %s updated", label)

    def remove(self, label: str) -> bool:
        return self.ensure_loaded().remove(label)

    def labels(self) -> list:
        return self.ensure_loaded().labels()
