"""
Views the host opens: a plain directory, a structured listing, or a process-backed listing.
"""
from typing import Callable, List, Optional

from .entry import CommandDescriptor, Listing


class View:
    """
    One opened browsing view.

    ``reload_command`` is installed by the host after the view is announced, so readers
    must wait for the next loop turn. Finish hooks run once the view's process completes.
    """

    def __init__(
        self,
        name: str,
        directory: str,
        listing: Optional[Listing] = None,
        command: Optional[CommandDescriptor] = None,
    ):
        self.name = name
        self.directory = directory
        self.listing = listing
        self.command = command
        self.reload_command: Optional[CommandDescriptor] = None
        self._finish_hooks: List[Callable[["View"], None]] = []
        self.finished = False

    @property
    def is_process_backed(self) -> bool:
        return self.command is not None

    def add_finish_hook(self, hook: Callable[["View"], None]) -> None:
        self._finish_hooks.append(hook)

    def finish(self) -> None:
        """Mark the view's process complete and run finish hooks once."""
        if self.finished:
            return
        self.finished = True
        hooks, self._finish_hooks = self._finish_hooks, []
        for hook in hooks:
            hook(self)

    def __repr__(self) -> str:
        return f"View({self.name!r}, {self.directory!r})"
