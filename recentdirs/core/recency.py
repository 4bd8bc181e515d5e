"""
In-memory MRU list of entries. Front is most recent; labels are unique.
"""
from typing import Callable, Iterable, Iterator, List, Optional

from .entry import Entry, RestoreAction


class RecencyList:
    """Ordered, label-unique sequence of Entry objects."""

    def __init__(self, entries: Optional[Iterable[Entry]] = None) -> None:
        self._entries: List[Entry] = []
        for entry in entries or ():
            if self.find(entry.label) is None:
                self._entries.append(entry)

    def insert(self, entry: Entry, max_size: Optional[int] = None) -> None:
        """Move entry to the front (dropping any same-label entry), then cap at max_size."""
        self._entries = [e for e in self._entries if e.label != entry.label]
        self._entries.insert(0, entry)
        if max_size:
            del self._entries[max_size:]

    def filter(self, predicate: Callable[[Entry], bool]) -> "RecencyList":
        return RecencyList(e for e in self._entries if predicate(e))

    def labels(self) -> List[str]:
        return [e.label for e in self._entries]

    def find(self, label: str) -> Optional[Entry]:
        for e in self._entries:
            if e.label == label:
                return e
        return None

    def set_action(self, label: str, action: RestoreAction) -> bool:
        """Replace the restore action of the entry with this label, keeping its position."""
        for i, e in enumerate(self._entries):
            if e.label == label:
                self._entries[i] = Entry(label, action)
                return True
        return False

    def remove(self, label: str) -> bool:
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.label != label]
        return len(self._entries) != before

    def replace(self, other: "RecencyList") -> None:
        """Take over other's contents wholesale."""
        self._entries = other.entries()

    def entries(self) -> List[Entry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def __eq__(self, other) -> bool:
        if not isinstance(other, RecencyList):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"RecencyList({self.labels()!r})"
