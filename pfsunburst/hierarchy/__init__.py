from .structures import FlatNode, FlatHierarchy
from .flattener import TreeFlattener, FlattenerConfig
from .colors import (
    BaseColorPolicy,
    ContrastTable,
    DepthAlternatingPalette,
    GroupKeyedPalette,
)

__all__ = [
    "FlatNode",
    "FlatHierarchy",
    "TreeFlattener",
    "FlattenerConfig",
    "BaseColorPolicy",
    "ContrastTable",
    "DepthAlternatingPalette",
    "GroupKeyedPalette",
]
