"""
Host hook system. Register callbacks with on(), emit with emit().
Used for the host's view-opened and shutdown notifications.
"""
from .logger import get_logger

logger = get_logger("events")


class EventEmitter:
    """
    Simple hook registry: event_name -> list of callables.
    Handler errors are logged and do not stop the remaining handlers.
    """

    def __init__(self):
        self._handlers = {}  # event_name -> list of callables

    def on(self, event_name: str, callback):
        """Register a callback for event_name. Callback receives keyword arguments from emit()."""
        self._handlers.setdefault(event_name, []).append(callback)

    def off(self, event_name: str, callback=None):
        """Remove one callback, or all callbacks for event_name if callback is None."""
        if event_name not in self._handlers:
            return
        if callback is None:
            self._handlers[event_name] = []
        else:
            self._handlers[event_name] = [h for h in self._handlers[event_name] if h != callback]

    def handlers(self, event_name: str) -> list:
        return list(self._handlers.get(event_name, ()))

    def emit(self, event_name: str, **payload):
        """Invoke all callbacks registered for event_name with **payload."""
        for h in self.handlers(event_name):
            try:
                h(**payload)
            except Exception:
                logger.exception("Hook for %s failed", event_name)
