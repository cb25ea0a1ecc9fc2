"""
Render context passed to every formatter.

Bundles the immutable RenderConfig with the layout and palette resolved
from it, so formatters stay pure functions of (message, context).
"""
from dataclasses import dataclass
from typing import Optional

from .layouts import LayoutConfig, get_layout
from .schemas import LayoutName, RenderConfig
from .themes import Palette


@dataclass(frozen=True)
class RenderContext:
    """Resolved view of a RenderConfig."""
    config: RenderConfig
    layout: LayoutConfig
    palette: Palette

    @classmethod
    def from_config(cls, config: Optional[RenderConfig] = None) -> "RenderContext":
        """Resolve layout and theme names of a config (defaults when None)."""
        config = config or RenderConfig()
        return cls(
            config=config,
            layout=get_layout(config.layout),
            palette=Palette(config.theme, enabled=config.use_colors),
        )

    @property
    def is_header(self) -> bool:
        return self.layout.name == LayoutName.HEADER

    @property
    def is_minimal(self) -> bool:
        return self.layout.name == LayoutName.MINIMAL

    @property
    def show_tool_params(self) -> bool:
        return self.layout.show_tool_params

    @property
    def show_stats(self) -> bool:
        """Stats need both the layout switch and no global suppression."""
        return self.layout.show_stats and not self.config.suppress_stats
