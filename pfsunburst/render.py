import json
import logging
from dataclasses import dataclass
from typing import Optional

import plotly.graph_objects as go

from .hierarchy.structures import FlatHierarchy

logger = logging.getLogger(__name__)


@dataclass
class SunburstRenderConfig:
    """Configuration for the sunburst figure."""
    title: str = "Public Finance: Challenges and Policy Commitments"
    depth_window: int = 2
    font_family: str = "Inter, sans-serif"
    font_size: int = 12
    inside_font_size: int = 10
    line_color: str = "#333333"
    line_width: float = 1
    height: Optional[int] = 700


class SunburstRenderer:
    """Builds the plotly sunburst for a flattened hierarchy and a focus node."""

    def __init__(self, config: Optional[SunburstRenderConfig] = None):
        self.config = config or SunburstRenderConfig()
        if self.config.depth_window < 1:
            raise ValueError("depth_window must be at least 1")

    def build_figure(
        self, hierarchy: FlatHierarchy, focus_id: Optional[str] = None
    ) -> go.Figure:
        if focus_id is None:
            focus_id = hierarchy.root_id

        trace = go.Sunburst(
            ids=hierarchy.ids,
            labels=hierarchy.labels,
            parents=hierarchy.parents,
            values=hierarchy.values,
            branchvalues="total",
            hoverinfo="none",
            marker=dict(
                colors=hierarchy.colors,
                line=dict(color=self.config.line_color, width=self.config.line_width),
            ),
            textfont=dict(size=self.config.font_size, color=hierarchy.text_colors),
            insidetextfont=dict(size=self.config.inside_font_size),
            textinfo="label",
            insidetextorientation="horizontal",
            level=focus_id,
            maxdepth=self.config.depth_window,
        )

        fig = go.Figure(trace)
        fig.update_layout(
            title=self.config.title,
            autosize=True,
            height=self.config.height,
            margin=dict(l=0, r=0, b=0, t=50),
            paper_bgcolor="rgba(0,0,0,0)",
            plot_bgcolor="rgba(0,0,0,0)",
            font=dict(family=self.config.font_family),
        )
        return fig

    def to_json(self, hierarchy: FlatHierarchy, focus_id: Optional[str] = None) -> dict:
        return json.loads(self.build_figure(hierarchy, focus_id).to_json())
