# Errors
from .errors import HierarchyError, InvalidHierarchy, UnknownNodeError

# Hierarchy
from .hierarchy.structures import FlatNode, FlatHierarchy
from .hierarchy.flattener import TreeFlattener, FlattenerConfig
from .hierarchy.colors import (
    BaseColorPolicy,
    ContrastTable,
    DepthAlternatingPalette,
    GroupKeyedPalette,
)

# Navigation
from .navigation.state import NavigationState
from .navigation.machine import NavigationStateMachine

# Detail rows
from .details.base import BaseDetailSource
from .details.sources import NodeContextDetailSource, PlaceholderDetailSource

# Rendering and view lifecycle
from .render import SunburstRenderer, SunburstRenderConfig
from .events import ClickEventChannel
from .view import SunburstView

# Data
from .data import PUBLIC_FINANCE_CHALLENGES

__all__ = [
    # Errors
    "HierarchyError",
    "InvalidHierarchy",
    "UnknownNodeError",
    # Hierarchy
    "FlatNode",
    "FlatHierarchy",
    "TreeFlattener",
    "FlattenerConfig",
    "BaseColorPolicy",
    "ContrastTable",
    "DepthAlternatingPalette",
    "GroupKeyedPalette",
    # Navigation
    "NavigationState",
    "NavigationStateMachine",
    # Detail rows
    "BaseDetailSource",
    "NodeContextDetailSource",
    "PlaceholderDetailSource",
    # Rendering and view lifecycle
    "SunburstRenderer",
    "SunburstRenderConfig",
    "ClickEventChannel",
    "SunburstView",
    # Data
    "PUBLIC_FINANCE_CHALLENGES",
]
