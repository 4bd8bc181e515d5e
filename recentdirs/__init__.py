"""recentdirs — most-recently-used directory history with an interactive reopen prompt."""

__version__ = "0.1.0"

from recentdirs.application.controller import SelectionController
from recentdirs.application.feature import RecentDirs
from recentdirs.core.entry import Entry, Listing
from recentdirs.core.host import Host
from recentdirs.core.recency import RecencyList

__all__ = [
    "__version__",
    "RecentDirs",
    "SelectionController",
    "Entry",
    "Listing",
    "Host",
    "RecencyList",
]
