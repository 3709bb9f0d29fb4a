from typing import Dict, List, Optional

from ..errors import UnknownNodeError


class FlatNode:
    """Represents one segment of the flattened sunburst hierarchy."""

    def __init__(
        self,
        node_id: str,
        label: str,
        display_label: str,
        parent_id: str,
        depth: int,
        color: str,
        text_color: str,
        value: int = 0,
        children: Optional[List[str]] = None,
    ) -> None:
        self.id = node_id
        self.label = label
        self.display_label = display_label
        self.parent_id = parent_id
        self.depth = depth
        self.color = color
        self.text_color = text_color
        self.value = value
        self.children = children if children is not None else []

    @property
    def is_root(self) -> bool:
        return self.parent_id == ""

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "parentId": self.parent_id,
            "depth": self.depth,
            "value": self.value,
            "children": list(self.children),
        }

    def __repr__(self) -> str:
        return (
            f"FlatNode(id={self.id!r}, depth={self.depth}, value={self.value}, "
            f"label={self.label[:40]!r}{'...' if len(self.label) > 40 else ''})"
        )


class FlatHierarchy:
    """
    The flattened hierarchy: parallel arrays in pre-order plus an index of
    every node by id. Built once by the flattener and not modified afterwards.
    """

    def __init__(
        self,
        ids: List[str],
        labels: List[str],
        parents: List[str],
        values: List[int],
        colors: List[str],
        text_colors: List[str],
        index: Dict[str, FlatNode],
        leaf_depth: int,
    ) -> None:
        self.ids = ids
        self.labels = labels
        self.parents = parents
        self.values = values
        self.colors = colors
        self.text_colors = text_colors
        self.index = index
        self.leaf_depth = leaf_depth

    @property
    def root_id(self) -> Optional[str]:
        return self.ids[0] if self.ids else None

    def __len__(self) -> int:
        return len(self.ids)

    def __contains__(self, node_id) -> bool:
        return isinstance(node_id, str) and node_id in self.index

    def get_node(self, node_id: str) -> FlatNode:
        # ids are strings; anything else, hashable or not, is unknown
        if not isinstance(node_id, str) or node_id not in self.index:
            raise UnknownNodeError(node_id)
        return self.index[node_id]

    def path_to(self, node_id: str) -> List[FlatNode]:
        """Returns the nodes from the root down to node_id, inclusive."""
        path = []
        node = self.get_node(node_id)
        while True:
            path.append(node)
            if node.is_root:
                break
            node = self.get_node(node.parent_id)
        path.reverse()
        return path

    def breadcrumbs(self, node_id: Optional[str]) -> List[str]:
        """Labels from just below the root down to node_id (inclusive)."""
        if not node_id:
            return []
        return [node.label for node in self.path_to(node_id)[1:]]

    def to_renderer_payload(self) -> dict:
        return {
            "ids": list(self.ids),
            "labels": list(self.labels),
            "parents": list(self.parents),
            "values": list(self.values),
            "colors": list(self.colors),
            "textColors": list(self.text_colors),
        }

    def to_dict(self) -> dict:
        payload = self.to_renderer_payload()
        payload["index"] = {
            node_id: node.to_dict() for node_id, node in self.index.items()
        }
        return payload

    def __repr__(self) -> str:
        return (
            f"FlatHierarchy(total_nodes={len(self.ids)}, "
            f"leaf_depth={self.leaf_depth}, root_id={self.root_id!r})"
        )
