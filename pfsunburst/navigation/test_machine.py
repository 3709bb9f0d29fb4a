import logging
from unittest.mock import MagicMock

import pytest

from pfsunburst.details.base import BaseDetailSource
from pfsunburst.hierarchy.flattener import TreeFlattener
from pfsunburst.navigation.machine import NavigationStateMachine
from pfsunburst.navigation.state import NavigationState

# R -> A -> B -> C, plus a second group so toggling has somewhere to go
TREE = {"R": {"A": {"B": ["C"], "D": ["E"]}, "F": {"G": ["H"]}}}
ROOT, A, B, C, D, E, F, G, H = [f"node-{i}" for i in range(9)]


@pytest.fixture
def hierarchy():
    return TreeFlattener().flatten(TREE)


@pytest.fixture
def machine(hierarchy):
    machine = NavigationStateMachine(hierarchy)
    machine.start()
    return machine


def test_initial_state_is_unfocused(hierarchy):
    machine = NavigationStateMachine(hierarchy)
    assert machine.state == NavigationState()
    assert not machine.state.is_focused
    assert machine.state.breadcrumbs == ()


def test_start_focuses_root(machine):
    assert machine.state.focus_id == ROOT
    assert machine.state.breadcrumbs == ()
    assert not machine.state.panel_open


def test_breadcrumbs_after_clicking_subgroup(machine):
    state = machine.handle_click(B)
    assert state.focus_id == B
    assert state.breadcrumbs == ("A", "B")


def test_click_group_focuses_it(machine):
    state = machine.handle_click(A)
    assert state.focus_id == A
    assert state.breadcrumbs == ("A",)


def test_click_focused_depth_one_returns_to_root(machine):
    machine.handle_click(A)
    state = machine.handle_click(A)
    assert state.focus_id == ROOT
    assert state.breadcrumbs == ()


def test_click_focused_depth_two_returns_to_parent(machine):
    machine.handle_click(G)
    state = machine.handle_click(G)
    assert state.focus_id == F
    assert state.breadcrumbs == ("F",)


def test_click_other_group_switches_focus(machine):
    machine.handle_click(A)
    assert machine.handle_click(F).focus_id == F
    assert machine.handle_click(D).focus_id == D


def test_click_root_recenters(machine):
    machine.handle_click(B)
    state = machine.handle_click(ROOT)
    assert state.focus_id == ROOT
    assert machine.handle_click(ROOT).focus_id == ROOT


def test_leaf_click_opens_panel_without_moving_focus(machine):
    machine.handle_click(B)
    state = machine.handle_click(C)
    assert state.focus_id == B
    assert state.breadcrumbs == ("A", "B")
    assert state.panel_open
    assert len(state.panel_rows) == 6
    assert all(len(row) == 80 for row in state.panel_rows)


def test_navigation_closes_panel(machine):
    machine.handle_click(C)
    assert machine.state.panel_open
    state = machine.handle_click(A)
    assert not state.panel_open
    assert state.panel_rows == ()


def test_close_detail_panel_keeps_focus(machine):
    machine.handle_click(A)
    machine.handle_click(E)
    state = machine.close_detail_panel()
    assert state.focus_id == A
    assert not state.panel_open
    assert state.panel_rows == ()


def test_unknown_id_leaves_state_unchanged(machine, caplog):
    machine.handle_click(B)
    before = machine.state
    with caplog.at_level(logging.WARNING):
        after = machine.handle_click("node-404")
    assert after == before
    assert machine.state is before
    assert "node-404" in caplog.text


@pytest.mark.parametrize("bad_id", [["node-1"], {"id": "node-1"}, 1, None])
def test_non_string_id_is_treated_as_unknown(machine, bad_id):
    machine.handle_click(B)
    before = machine.state
    assert machine.handle_click(bad_id) is before
    assert machine.state is before


def test_detail_source_is_pluggable(hierarchy):
    source = MagicMock(spec=BaseDetailSource)
    source.fetch_detail_rows.return_value = ["row one", "row two"]
    machine = NavigationStateMachine(hierarchy, detail_source=source)
    machine.start()
    state = machine.handle_click(H)
    source.fetch_detail_rows.assert_called_once_with(H)
    assert state.panel_rows == ("row one", "row two")


def test_rejects_bad_collaborators(hierarchy):
    with pytest.raises(ValueError):
        NavigationStateMachine({"R": {}})
    with pytest.raises(ValueError):
        NavigationStateMachine(hierarchy, detail_source=object())


def test_state_to_dict(machine):
    machine.handle_click(C)
    payload = machine.state.to_dict()
    assert payload["focusId"] == ROOT
    assert payload["panelOpen"] is True
    assert len(payload["panelRows"]) == 6
    assert payload["breadcrumbs"] == []
