"""
Selection: prompt over the MRU labels, resolve the answer to an Entry, run its restore action.
"""
from typing import Callable, Iterable, Optional

from recentdirs.core.config import DEFAULT_SEARCH_VIEW_NAMES
from recentdirs.core.entry import Entry, NoAction, ReopenListing, ReopenPath, ReplayCommand
from recentdirs.core.host import Host
from recentdirs.core.logger import get_logger
from recentdirs.core.views import View

from .feature import RecentDirs

logger = get_logger("controller")

PROMPT = "Open recent directory: "

CompletionNotice = Callable[[View], bool]


def search_view_notice(names: Iterable[str] = DEFAULT_SEARCH_VIEW_NAMES) -> CompletionNotice:
    """Notice predicate matching views by name."""
    names = frozenset(names)
    return lambda view: view.name in names


class ActionEvaluator:
    """Dispatches an Entry's restore action to the host."""

    def __init__(self, host: Host, completion_notice: Optional[CompletionNotice] = None):
        self.host = host
        self.completion_notice = completion_notice or search_view_notice()

    def run(self, entry: Entry) -> View:
        action = entry.action
        if isinstance(action, NoAction):
            return self.host.open_directory(entry.label)
        if isinstance(action, ReopenPath):
            return self.host.open_directory(action.path)
        if isinstance(action, ReopenListing):
            return self.host.open_directory(action.listing)
        if isinstance(action, ReplayCommand):
            return self._replay(action)
        raise TypeError(f"Unknown restore action: {action!r}")

    def _replay(self, action: ReplayCommand) -> View:
        command = action.command
        view = self.host.replay(command)
        if self.completion_notice(view):
            view.add_finish_hook(lambda v: self.host.message(f"{v.name} finished: {command}"))
        return view


class SelectionController:
    def __init__(self, feature: RecentDirs, evaluator: Optional[ActionEvaluator] = None):
        self.feature = feature
        self.evaluator = evaluator or ActionEvaluator(feature.host)

    def resolve(self, answer: str) -> Entry:
        """Stored entry with exactly this label, else the answer as a literal path."""
        entry = self.feature.ensure_loaded().find(answer)
        if entry is None:
            logger.debug("No entry labelled %r; opening it as a path", answer)
            return Entry.plain(answer)
        return entry

    def open(self) -> Optional[View]:
        """Prompt over the list and open the choice. Returns the opened view, None if aborted."""
        labels = self.feature.ensure_loaded().labels()
        answer = self.feature.host.select(PROMPT, labels)
        if not answer:
            return None
        return self.evaluator.run(self.resolve(answer))
