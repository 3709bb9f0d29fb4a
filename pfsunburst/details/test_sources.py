import pytest

from pfsunburst.details.sources import (
    LOREM_IPSUM,
    NodeContextDetailSource,
    PlaceholderDetailSource,
)
from pfsunburst.errors import UnknownNodeError
from pfsunburst.hierarchy.flattener import TreeFlattener


def test_placeholder_rows():
    rows = PlaceholderDetailSource().fetch_detail_rows("node-3")
    assert len(rows) == 6
    assert all(len(row) == 80 for row in rows)
    assert rows[0] == LOREM_IPSUM[:80]


def test_placeholder_custom_size():
    rows = PlaceholderDetailSource(num_rows=2, chars_per_row=500).fetch_detail_rows("x")
    assert len(rows) == 2
    assert len(rows[0]) == 500


@pytest.mark.parametrize(
    "kwargs", [{"num_rows": -1}, {"chars_per_row": 0}, {"text": ""}]
)
def test_placeholder_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        PlaceholderDetailSource(**kwargs)


def test_node_context_rows():
    hierarchy = TreeFlattener().flatten({"R": {"A": {"B": ["a statement"]}}})
    rows = NodeContextDetailSource(hierarchy).fetch_detail_rows("node-3")
    assert rows == ["a statement", "Level 1: A", "Level 2: B"]


def test_node_context_unknown_node():
    hierarchy = TreeFlattener().flatten({"R": {"A": {"B": ["x"]}}})
    with pytest.raises(UnknownNodeError):
        NodeContextDetailSource(hierarchy).fetch_detail_rows("node-9")
