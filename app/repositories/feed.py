"""In-process change feed - pushes collection change notices to subscribers."""

import threading
from collections import defaultdict
from collections.abc import Callable

from loguru import logger

Listener = Callable[[], None]


class ChangeFeed:
    """Per-collection subscriber registry.

    Listeners are called on the writing thread after the change is committed.
    A failing listener is logged and skipped; it never fails the write.
    """

    def __init__(self):
        self._listeners: dict[str, list[Listener]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, collection: str, listener: Listener) -> Callable[[], None]:
        """Register listener; returns an unsubscribe function."""
        with self._lock:
            self._listeners[collection].append(listener)
        logger.debug("Subscribed to {}", collection)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners[collection]:
                    self._listeners[collection].remove(listener)
                    logger.debug("Unsubscribed from {}", collection)

        return unsubscribe

    def publish(self, collection: str) -> None:
        """Notify all listeners of a collection."""
        with self._lock:
            listeners = list(self._listeners.get(collection, ()))

        for listener in listeners:
            try:
                listener()
            except Exception as e:
                logger.warning("Listener on {} failed: {}", collection, e)

    def clear(self) -> None:
        """Drop all listeners."""
        with self._lock:
            self._listeners.clear()


# Global feed instance
feed = ChangeFeed()
