"""
Entry data model: a display label plus the restore action used to reopen it.
Restore actions are plain data; ActionEvaluator (application/controller.py) dispatches on them.
"""
from dataclasses import dataclass, field
from typing import Tuple, Union


@dataclass(frozen=True)
class Listing:
    """Structured directory listing: a name (directory) plus explicit member paths."""

    name: str
    files: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "files", tuple(self.files))


@dataclass(frozen=True)
class CommandDescriptor:
    """External command that produced a process-backed view."""

    argv: Tuple[str, ...]
    directory: str
    view_name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "argv", tuple(self.argv))

    def __str__(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True)
class NoAction:
    """Plain path entry; the label is the path."""


@dataclass(frozen=True)
class ReopenPath:
    path: str


@dataclass(frozen=True)
class ReopenListing:
    listing: Listing


@dataclass(frozen=True)
class ReplayCommand:
    command: CommandDescriptor


RestoreAction = Union[NoAction, ReopenPath, ReopenListing, ReplayCommand]

NO_ACTION = NoAction()


@dataclass(frozen=True)
class Entry:
    label: str
    action: RestoreAction = field(default=NO_ACTION)

    @classmethod
    def plain(cls, path: str) -> "Entry":
        return cls(label=path)

    @property
    def path(self) -> str:
        """Filesystem location this entry refers to (used by cleanup and prefix checks)."""
        action = self.action
        if isinstance(action, ReopenPath):
            return action.path
        if isinstance(action, ReopenListing):
            return action.listing.name
        if isinstance(action, ReplayCommand):
            return action.command.directory
        return self.label
