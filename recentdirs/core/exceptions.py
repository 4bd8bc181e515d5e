"""recentdirs exceptions."""


class RecentDirsError(Exception):
    """Base exception for recentdirs."""


class ConfigError(RecentDirsError):
    """Invalid configuration value."""


class HistoryCorruptError(RecentDirsError):
    """History file exists but its content cannot be decoded."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Corrupt history file {path}: {reason}")


class HistoryUnreadableError(RecentDirsError):
    """History file exists but cannot be read (permissions, I/O error)."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read history file {path}: {reason}")
