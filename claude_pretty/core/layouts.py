"""
Layout modes for claude-pretty-printer.

Layouts control verbosity and visual density of the output: whether
messages are framed, whether tool parameters and statistics are shown,
and how much content survives truncation.
"""
from dataclasses import dataclass

from .constants import MINIMAL_CONTENT_LENGTH
from .schemas import LayoutName


@dataclass(frozen=True)
class LayoutConfig:
    """Fixed bundle of verbosity switches for one layout."""
    name: str
    description: str
    show_box: bool            # Wrap content in a horizontal-rule frame
    show_icons: bool          # Show status icons
    show_tool_params: bool    # Show tool input parameters
    show_stats: bool          # Show the statistics block of results
    truncate_content: bool    # Truncate long content
    max_content_length: int   # Max chars when truncating (0 = no limit)


FULL_LAYOUT = LayoutConfig(
    name=LayoutName.FULL,
    description="Full output with boxes, icons, and all details",
    show_box=True,
    show_icons=True,
    show_tool_params=True,
    show_stats=True,
    truncate_content=False,
    max_content_length=0,
)

COMPACT_LAYOUT = LayoutConfig(
    name=LayoutName.COMPACT,
    description="Condensed output without boxes",
    show_box=False,
    show_icons=True,
    show_tool_params=True,
    show_stats=True,
    truncate_content=False,
    max_content_length=0,
)

MINIMAL_LAYOUT = LayoutConfig(
    name=LayoutName.MINIMAL,
    description="Single line per message with truncated content",
    show_box=False,
    show_icons=True,
    show_tool_params=False,
    show_stats=False,
    truncate_content=True,
    max_content_length=MINIMAL_CONTENT_LENGTH,
)

HEADER_LAYOUT = LayoutConfig(
    name=LayoutName.HEADER,
    description="Headers only, no content",
    show_box=False,
    show_icons=True,
    show_tool_params=False,
    show_stats=False,
    truncate_content=True,
    max_content_length=0,
)

LAYOUTS: dict[str, LayoutConfig] = {
    layout.name: layout
    for layout in (FULL_LAYOUT, COMPACT_LAYOUT, MINIMAL_LAYOUT, HEADER_LAYOUT)
}

# Layout names for CLI validation
LAYOUT_NAMES: list[str] = list(LAYOUTS)


def get_layout(name: str) -> LayoutConfig:
    """
    Get a layout by name.

    Args:
        name: The layout name.

    Returns:
        The layout config, or the full layout if the name is unknown.
    """
    return LAYOUTS.get(name, FULL_LAYOUT)
