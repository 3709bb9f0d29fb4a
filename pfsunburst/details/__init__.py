from .base import BaseDetailSource
from .sources import NodeContextDetailSource, PlaceholderDetailSource

__all__ = [
    "BaseDetailSource",
    "NodeContextDetailSource",
    "PlaceholderDetailSource",
]
