import logging
import threading
from typing import Mapping, Optional

from .data import PUBLIC_FINANCE_CHALLENGES
from .details.base import BaseDetailSource
from .events import ClickEventChannel
from .hierarchy.flattener import FlattenerConfig, TreeFlattener
from .navigation.machine import NavigationStateMachine
from .navigation.state import NavigationState
from .render import SunburstRenderConfig, SunburstRenderer

logger = logging.getLogger(__name__)


class SunburstView:
    """
    Ties the flattened hierarchy, the navigation state machine and the
    renderer together for the lifetime of one view.

    The hierarchy is flattened before anything else, so no click can reach
    the state machine before the index exists. open() subscribes the click
    handler to the channel and close() releases it; both are idempotent and
    the view can be used as a context manager.
    """

    def __init__(
        self,
        tree: Optional[Mapping] = None,
        config: Optional[FlattenerConfig] = None,
        detail_source: Optional[BaseDetailSource] = None,
        channel: Optional[ClickEventChannel] = None,
        render_config: Optional[SunburstRenderConfig] = None,
    ) -> None:
        if tree is None:
            tree = PUBLIC_FINANCE_CHALLENGES

        self.hierarchy = TreeFlattener(config).flatten(tree)
        self.machine = NavigationStateMachine(self.hierarchy, detail_source)
        self.machine.start()
        self.renderer = SunburstRenderer(render_config)
        self.channel = channel if channel is not None else ClickEventChannel()
        self._subscribed = False
        # Serializes channel clicks with direct calls from the server
        self._lock = threading.RLock()

    @property
    def state(self) -> NavigationState:
        return self.machine.state

    @property
    def is_open(self) -> bool:
        return self._subscribed

    def open(self) -> "SunburstView":
        if not self._subscribed:
            self.channel.on(self._on_click)
            self._subscribed = True
            logger.info("Sunburst view subscribed to click events")
        return self

    def close(self) -> None:
        if self._subscribed:
            self.channel.remove_listener(self._on_click)
            self._subscribed = False
            logger.info("Sunburst view unsubscribed from click events")

    def __enter__(self) -> "SunburstView":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _on_click(self, node_id: str) -> NavigationState:
        with self._lock:
            return self.machine.handle_click(node_id)

    def close_detail_panel(self) -> NavigationState:
        with self._lock:
            return self.machine.close_detail_panel()

    def reset(self) -> NavigationState:
        with self._lock:
            return self.machine.start()

    def figure(self):
        return self.renderer.build_figure(self.hierarchy, self.state.focus_id)

    def snapshot(self) -> dict:
        with self._lock:
            state = self.state
        return {
            "state": state.to_dict(),
            "figure": self.renderer.to_json(self.hierarchy, state.focus_id),
        }
