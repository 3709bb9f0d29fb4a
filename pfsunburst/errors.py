class HierarchyError(Exception):
    """Base class for errors raised while building or querying a hierarchy."""


class InvalidHierarchy(HierarchyError, ValueError):
    """The nested literal does not have the expected tree shape."""


class UnknownNodeError(HierarchyError, KeyError):
    """A node id was looked up that is not present in the index."""

    def __init__(self, node_id: str) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Unknown node id: {self.node_id!r}"
