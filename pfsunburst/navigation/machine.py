import logging
from typing import Optional

from ..details.base import BaseDetailSource
from ..details.sources import PlaceholderDetailSource
from ..errors import UnknownNodeError
from ..hierarchy.structures import FlatHierarchy
from .state import NavigationState

logger = logging.getLogger(__name__)


class NavigationStateMachine:
    """
    Tracks which node is centered in the sunburst and whether the detail
    panel is open.

    Clicking the root recenters on the root. Clicking an inner ring zooms into
    that node, or back out to its parent when it is already centered. Clicking
    a statement on the outermost ring opens the detail panel without moving
    the focus.
    """

    def __init__(
        self,
        hierarchy: FlatHierarchy,
        detail_source: Optional[BaseDetailSource] = None,
    ) -> None:
        if not isinstance(hierarchy, FlatHierarchy):
            raise ValueError("hierarchy must be an instance of FlatHierarchy")
        if detail_source is None:
            detail_source = PlaceholderDetailSource()
        if not isinstance(detail_source, BaseDetailSource):
            raise ValueError("detail_source must be an instance of BaseDetailSource")

        self.hierarchy = hierarchy
        self.detail_source = detail_source
        self.state = NavigationState()

    def start(self) -> NavigationState:
        """Centers the root. Called once the hierarchy has been flattened."""
        return self._focus(self.hierarchy.root_id)

    def handle_click(self, node_id: str) -> NavigationState:
        try:
            node = self.hierarchy.get_node(node_id)
        except UnknownNodeError as e:
            logger.warning(f"Ignoring click: {e}")
            return self.state

        if node.depth == 0:
            return self._focus(node.id)

        if node.depth < self.hierarchy.leaf_depth:
            if self.state.focus_id == node.id:
                logger.debug(f"Collapsing {node.id} back to {node.parent_id}")
                return self._focus(node.parent_id)
            return self._focus(node.id)

        rows = tuple(self.detail_source.fetch_detail_rows(node.id))
        logger.debug(f"Opening detail panel for {node.id} with {len(rows)} rows")
        self.state = NavigationState(
            focus_id=self.state.focus_id,
            panel_open=True,
            panel_rows=rows,
            breadcrumbs=self.state.breadcrumbs,
        )
        return self.state

    def close_detail_panel(self) -> NavigationState:
        self.state = self.state.with_panel_closed()
        return self.state

    def _focus(self, node_id: str) -> NavigationState:
        self.state = NavigationState(
            focus_id=node_id,
            breadcrumbs=tuple(self.hierarchy.breadcrumbs(node_id)),
        )
        return self.state
