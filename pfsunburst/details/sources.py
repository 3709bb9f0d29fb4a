import logging
from typing import List

from ..hierarchy.structures import FlatHierarchy
from ..utils import lorem_rows
from .base import BaseDetailSource

logger = logging.getLogger(__name__)

LOREM_IPSUM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, "
    "quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo "
    "consequat. Duis aute irure dolor in reprehenderit in voluptate velit esse "
    "cillum dolore eu fugiat nulla pariatur. Excepteur sint occaecat cupidatat non "
    "proident, sunt in culpa qui officia deserunt mollit anim id est laborum. "
)


class PlaceholderDetailSource(BaseDetailSource):
    """Filler rows standing in for text extracted from source documents."""

    def __init__(self, num_rows: int = 6, chars_per_row: int = 80, text: str = LOREM_IPSUM):
        if not isinstance(num_rows, int) or num_rows < 0:
            raise ValueError("num_rows must be a non-negative integer")
        if not isinstance(chars_per_row, int) or chars_per_row < 1:
            raise ValueError("chars_per_row must be an integer and at least 1")
        if not text:
            raise ValueError("text must not be empty")
        self.num_rows = num_rows
        self.chars_per_row = chars_per_row
        self.text = text

    def fetch_detail_rows(self, node_id: str) -> List[str]:
        return lorem_rows(self.text, self.num_rows, self.chars_per_row)


class NodeContextDetailSource(BaseDetailSource):
    """Rows describing a statement and the challenge groups above it."""

    def __init__(self, hierarchy: FlatHierarchy):
        self.hierarchy = hierarchy

    def fetch_detail_rows(self, node_id: str) -> List[str]:
        path = self.hierarchy.path_to(node_id)
        rows = [path[-1].label]
        for depth, node in enumerate(path[1:-1], start=1):
            rows.append(f"Level {depth}: {node.label}")
        return rows
