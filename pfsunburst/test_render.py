import pytest

from pfsunburst.hierarchy.flattener import TreeFlattener
from pfsunburst.render import SunburstRenderConfig, SunburstRenderer


@pytest.fixture
def hierarchy():
    return TreeFlattener().flatten({"R": {"A": {"B": ["C", "D"]}}})


def test_build_figure_passes_flat_arrays(hierarchy):
    fig = SunburstRenderer().build_figure(hierarchy)
    trace = fig.data[0]
    assert trace.type == "sunburst"
    assert list(trace.ids) == hierarchy.ids
    assert list(trace.labels) == hierarchy.labels
    assert list(trace.parents) == hierarchy.parents
    assert list(trace.values) == hierarchy.values
    assert list(trace.marker.colors) == hierarchy.colors
    assert list(trace.textfont.color) == hierarchy.text_colors


def test_build_figure_display_directives(hierarchy):
    trace = SunburstRenderer().build_figure(hierarchy).data[0]
    assert trace.branchvalues == "total"
    assert trace.textinfo == "label"
    assert trace.hoverinfo == "none"
    assert trace.maxdepth == 2
    assert trace.level == hierarchy.root_id


def test_build_figure_uses_focus(hierarchy):
    trace = SunburstRenderer().build_figure(hierarchy, "node-2").data[0]
    assert trace.level == "node-2"


def test_render_config(hierarchy):
    config = SunburstRenderConfig(title="Taxonomy", depth_window=3)
    fig = SunburstRenderer(config).build_figure(hierarchy)
    assert fig.data[0].maxdepth == 3
    assert fig.layout.title.text == "Taxonomy"


def test_render_config_rejects_empty_window():
    with pytest.raises(ValueError):
        SunburstRenderer(SunburstRenderConfig(depth_window=0))


def test_to_json(hierarchy):
    payload = SunburstRenderer().to_json(hierarchy, "node-1")
    assert payload["data"][0]["type"] == "sunburst"
    assert payload["data"][0]["level"] == "node-1"
    assert payload["data"][0]["ids"] == hierarchy.ids
    assert "layout" in payload
