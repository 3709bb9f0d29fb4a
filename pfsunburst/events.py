import logging
import threading
from typing import Callable, List

logger = logging.getLogger(__name__)

ClickHandler = Callable[[str], object]


class ClickEventChannel:
    """
    Delivers node clicks from the renderer to subscribed handlers.

    Subscribing the same handler twice keeps a single registration. Events are
    delivered one at a time; a click is fully handled before the next starts.
    """

    def __init__(self) -> None:
        self._listeners: List[ClickHandler] = []
        self._lock = threading.RLock()

    def on(self, handler: ClickHandler) -> None:
        with self._lock:
            if handler in self._listeners:
                logger.debug(f"Handler {handler!r} already subscribed")
                return
            self._listeners.append(handler)

    def remove_listener(self, handler: ClickHandler) -> None:
        with self._lock:
            if handler in self._listeners:
                self._listeners.remove(handler)

    def listener_count(self) -> int:
        return len(self._listeners)

    def emit(self, node_id: str) -> list:
        with self._lock:
            if not self._listeners:
                logger.debug(f"Dropping click on {node_id!r}: no listeners")
                return []
            return [handler(node_id) for handler in list(self._listeners)]
