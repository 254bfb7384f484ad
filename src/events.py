import logging
from collections import defaultdict
from typing import Callable

RESIZE = "resize"


class EventDispatcher:
    """Synchronous named-event dispatcher.

    Listeners run in subscription order on the caller's thread; each emit
    completes before it returns.
    """

    def __init__(self):
        self._listeners: dict[str, list[Callable]] = defaultdict(list)
        self.logger = logging.getLogger(__name__)

    def subscribe(self, event: str, callback: Callable) -> Callable[[], None]:
        """Register callback for event. Returns a function that removes it.
        Calling the returned function more than once is a no-op."""
        self._listeners[event].append(callback)

        def unsubscribe():
            listeners = self._listeners.get(event, [])
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    def emit(self, event: str, *args):
        listeners = list(self._listeners.get(event, []))
        self.logger.debug("Emitting %s to %d listeners", event, len(listeners))
        for callback in listeners:
            callback(*args)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))
