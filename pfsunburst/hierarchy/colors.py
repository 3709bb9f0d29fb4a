import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence, Tuple

from ..data import GROUP_PALETTES, STRONG_FILLS
from ..utils import normalize_color

logger = logging.getLogger(__name__)

ROOT_FILL = "#FFFFFF"
NEUTRAL_GRAY = "#D3D3D3"


class BaseColorPolicy(ABC):
    @abstractmethod
    def color_for(
        self,
        label: str,
        depth: int,
        sibling_index: int,
        group_label: Optional[str],
    ) -> str:
        pass


class GroupKeyedPalette(BaseColorPolicy):
    """
    Colors every node after the challenge group it sits under. The group's
    sub-palette is indexed by depth, so a bottleneck and its statements share
    the group's second and third colors.
    """

    def __init__(
        self,
        palettes: Optional[Dict[str, Dict[int, str]]] = None,
        fallback: str = NEUTRAL_GRAY,
        root_fill: str = ROOT_FILL,
    ):
        if palettes is None:
            palettes = GROUP_PALETTES
        if not isinstance(palettes, dict):
            raise ValueError("palettes must be a dictionary of group: palette pairs")
        self.palettes = {
            group: {depth: normalize_color(c) for depth, c in palette.items()}
            for group, palette in palettes.items()
        }
        self.fallback = normalize_color(fallback)
        self.root_fill = normalize_color(root_fill)

    def color_for(self, label, depth, sibling_index, group_label):
        if depth == 0:
            return self.root_fill

        palette = self.palettes.get(group_label)
        if palette is None:
            logger.debug(f"No palette for group {group_label!r}, using fallback")
            return self.fallback
        return palette.get(depth, self.fallback)

    def __repr__(self) -> str:
        return f"GroupKeyedPalette(groups={len(self.palettes)})"


DEFAULT_DEPTH_PALETTES = {
    1: ("#F84B64", "#FF848B"),
    2: ("#C9E7F8", "#A9CCE3"),
    3: ("#D2B4DE", "#E8DAEF"),
}


class DepthAlternatingPalette(BaseColorPolicy):
    """Picks from a two-color palette per depth by sibling index parity."""

    def __init__(
        self,
        palettes: Optional[Dict[int, Sequence[str]]] = None,
        fallback: str = NEUTRAL_GRAY,
        root_fill: str = ROOT_FILL,
    ):
        if palettes is None:
            palettes = DEFAULT_DEPTH_PALETTES
        for depth, palette in palettes.items():
            if len(palette) != 2:
                raise ValueError(
                    f"palette for depth {depth} must have exactly two colors"
                )
        self.palettes: Dict[int, Tuple[str, str]] = {
            depth: tuple(normalize_color(c) for c in palette)
            for depth, palette in palettes.items()
        }
        self.fallback = normalize_color(fallback)
        self.root_fill = normalize_color(root_fill)

    def color_for(self, label, depth, sibling_index, group_label):
        if depth == 0:
            return self.root_fill

        palette = self.palettes.get(depth)
        if palette is None:
            return self.fallback
        return palette[sibling_index % 2]

    def __repr__(self) -> str:
        return f"DepthAlternatingPalette(depths={sorted(self.palettes)})"


class ContrastTable:
    """Maps a fill color to the text color drawn on top of it."""

    def __init__(
        self, table: Optional[Dict[str, str]] = None, default: str = "black"
    ):
        if table is None:
            table = STRONG_FILLS
        self.table = {
            normalize_color(fill): text for fill, text in table.items()
        }
        self.default = default

    def text_color(self, fill: str) -> str:
        return self.table.get(normalize_color(fill), self.default)

    def __repr__(self) -> str:
        return f"ContrastTable(strong={sorted(self.table)}, default={self.default!r})"


def color_policy_from_name(name: str) -> BaseColorPolicy:
    if name == "group":
        return GroupKeyedPalette()
    if name == "depth":
        return DepthAlternatingPalette()
    raise ValueError(f"Unknown color policy '{name}'. Use 'group' or 'depth'.")
