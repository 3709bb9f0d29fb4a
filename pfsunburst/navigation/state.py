from dataclasses import dataclass, field, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class NavigationState:
    focus_id: Optional[str] = None
    panel_open: bool = False
    panel_rows: Tuple[str, ...] = field(default_factory=tuple)
    breadcrumbs: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_focused(self) -> bool:
        return self.focus_id is not None

    def with_panel_closed(self) -> "NavigationState":
        return replace(self, panel_open=False, panel_rows=())

    def to_dict(self) -> dict:
        return {
            "focusId": self.focus_id,
            "panelOpen": self.panel_open,
            "panelRows": list(self.panel_rows),
            "breadcrumbs": list(self.breadcrumbs),
        }
