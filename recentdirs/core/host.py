"""
Abstract host interface. The feature only talks to the browser, prompt and process model
through Host; use a concrete subclass (see recentdirs/cli/console.py).
"""
from typing import Optional, Sequence, Union

from .entry import CommandDescriptor, Listing
from .events import EventEmitter
from .loop import EventLoop
from .views import View


class Host:
    """Abstract host: events and loop are concrete, UI operations are for subclasses."""

    def __init__(self):
        self.events = EventEmitter()
        self.loop = EventLoop()

    def select(self, prompt: str, labels: Sequence[str]) -> Optional[str]:
        """Ask the user for one label (or free text). None when aborted."""
        raise NotImplementedError

    def open_directory(self, target: Union[str, Listing]) -> View:
        raise NotImplementedError

    def replay(self, command: CommandDescriptor) -> View:
        """Re-run a process-backed view's command; returns the new view."""
        raise NotImplementedError

    def message(self, text: str) -> None:
        raise NotImplementedError
