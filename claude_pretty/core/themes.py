"""
Color themes for claude-pretty-printer.

Each theme maps semantic color slots to the ANSI color operations used to
realize them. Formatters never pick raw colors for themed content; they ask
a Palette for a slot, so switching themes recolors the whole output.

Usage:
    from .themes import Palette, ColorSlot

    palette = Palette("nord", enabled=True)
    palette.primary("Read")
    palette.slot(ColorSlot.MUTED, "(connected)")
"""
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .constants import AnsiColors
from .schemas import ThemeName

C = AnsiColors


class ColorSlot(StrEnum):
    """Semantic color slots a theme must provide."""
    # Primary colors for main content
    PRIMARY = "primary"        # Tool names, emphasis
    SECONDARY = "secondary"    # Secondary highlights, cache info
    ACCENT = "accent"          # Special highlights

    # Semantic colors
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"

    # Message type colors (headers)
    ASSISTANT = "assistant"
    USER = "user"
    RESULT = "result"
    SYSTEM = "system"

    # Utility colors
    MUTED = "muted"
    INFO = "info"


ColorOp = tuple[AnsiColors, ...]


@dataclass(frozen=True)
class Theme:
    """A named mapping from color slot to color operation."""
    name: str
    description: str
    slots: dict[str, ColorOp]


DEFAULT_THEME = Theme(
    name=ThemeName.DEFAULT,
    description="Vibrant colors for maximum readability",
    slots={
        ColorSlot.PRIMARY: (C.CYAN,),
        ColorSlot.SECONDARY: (C.BLUE,),
        ColorSlot.ACCENT: (C.MAGENTA,),
        ColorSlot.SUCCESS: (C.GREEN,),
        ColorSlot.ERROR: (C.RED,),
        ColorSlot.WARNING: (C.YELLOW,),
        ColorSlot.ASSISTANT: (C.BLUE,),
        ColorSlot.USER: (C.GREEN,),
        ColorSlot.RESULT: (C.MAGENTA,),
        ColorSlot.SYSTEM: (C.YELLOW,),
        ColorSlot.MUTED: (C.DIM,),
        ColorSlot.INFO: (C.CYAN,),
    },
)

MONOKAI_THEME = Theme(
    name=ThemeName.MONOKAI,
    description="Warm dark theme with classic Monokai colors",
    slots={
        ColorSlot.PRIMARY: (C.MAGENTA,),
        ColorSlot.SECONDARY: (C.GREEN,),
        ColorSlot.ACCENT: (C.YELLOW,),
        ColorSlot.SUCCESS: (C.GREEN,),
        ColorSlot.ERROR: (C.MAGENTA,),
        ColorSlot.WARNING: (C.YELLOW,),
        ColorSlot.ASSISTANT: (C.CYAN,),
        ColorSlot.USER: (C.GREEN,),
        ColorSlot.RESULT: (C.MAGENTA,),
        ColorSlot.SYSTEM: (C.YELLOW,),
        ColorSlot.MUTED: (C.DIM,),
        ColorSlot.INFO: (C.CYAN,),
    },
)

DRACULA_THEME = Theme(
    name=ThemeName.DRACULA,
    description="Purple-centric theme with Dracula palette",
    slots={
        ColorSlot.PRIMARY: (C.MAGENTA,),
        ColorSlot.SECONDARY: (C.CYAN,),
        ColorSlot.ACCENT: (C.MAGENTA,),
        ColorSlot.SUCCESS: (C.GREEN,),
        ColorSlot.ERROR: (C.RED,),
        ColorSlot.WARNING: (C.YELLOW,),
        ColorSlot.ASSISTANT: (C.MAGENTA,),
        ColorSlot.USER: (C.GREEN,),
        ColorSlot.RESULT: (C.MAGENTA,),
        ColorSlot.SYSTEM: (C.YELLOW,),
        ColorSlot.MUTED: (C.DIM,),
        ColorSlot.INFO: (C.CYAN,),
    },
)

NORD_THEME = Theme(
    name=ThemeName.NORD,
    description="Arctic calm theme with muted colors",
    slots={
        ColorSlot.PRIMARY: (C.CYAN,),
        ColorSlot.SECONDARY: (C.BLUE,),
        ColorSlot.ACCENT: (C.MAGENTA,),
        ColorSlot.SUCCESS: (C.GREEN,),
        ColorSlot.ERROR: (C.RED,),
        ColorSlot.WARNING: (C.YELLOW,),
        ColorSlot.ASSISTANT: (C.CYAN,),
        ColorSlot.USER: (C.GREEN,),
        ColorSlot.RESULT: (C.MAGENTA,),
        ColorSlot.SYSTEM: (C.YELLOW,),
        ColorSlot.MUTED: (C.DIM,),
        ColorSlot.INFO: (C.BLUE,),
    },
)

THEMES: dict[str, Theme] = {
    theme.name: theme
    for theme in (DEFAULT_THEME, MONOKAI_THEME, DRACULA_THEME, NORD_THEME)
}

# Theme names for CLI validation
THEME_NAMES: list[str] = list(THEMES)


def get_theme(name: str) -> Theme:
    """
    Get a theme by name.

    Args:
        name: The theme name.

    Returns:
        The theme, or the default theme if the name is unknown.
    """
    return THEMES.get(name, DEFAULT_THEME)


def resolve_color(theme_name: str, slot: str) -> ColorOp:
    """
    Resolve a semantic slot to a color operation.

    Falls back to the default theme's slot, then to the empty operation
    (unstyled passthrough).

    Args:
        theme_name: The theme name.
        slot: The semantic slot name.

    Returns:
        Tuple of ANSI codes to apply, possibly empty.
    """
    ops = get_theme(theme_name).slots.get(slot)
    if ops is None:
        ops = DEFAULT_THEME.slots.get(slot, ())
    return ops


class Palette:
    """
    Applies theme colors to text.

    Args:
        theme_name: Theme to resolve slots against.
        enabled: When False every method returns the text unchanged.
    """

    def __init__(self, theme_name: str = ThemeName.DEFAULT, enabled: bool = True) -> None:
        self.theme = get_theme(theme_name)
        self.enabled = enabled

    def style(self, text: Any, *codes: AnsiColors) -> str:
        """Wrap text in the given ANSI codes (unthemed)."""
        text = str(text)
        if not self.enabled or not codes:
            return text
        return f"{''.join(codes)}{text}{C.RESET}"

    def slot(self, slot: str, text: Any) -> str:
        """Color text with a semantic slot of the active theme."""
        return self.style(text, *resolve_color(self.theme.name, slot))

    # Themed slots

    def primary(self, text: Any) -> str:
        return self.slot(ColorSlot.PRIMARY, text)

    def secondary(self, text: Any) -> str:
        return self.slot(ColorSlot.SECONDARY, text)

    def accent(self, text: Any) -> str:
        return self.slot(ColorSlot.ACCENT, text)

    def success(self, text: Any) -> str:
        return self.slot(ColorSlot.SUCCESS, text)

    def error(self, text: Any) -> str:
        return self.slot(ColorSlot.ERROR, text)

    def warning(self, text: Any) -> str:
        return self.slot(ColorSlot.WARNING, text)

    def muted(self, text: Any) -> str:
        return self.slot(ColorSlot.MUTED, text)

    def info(self, text: Any) -> str:
        return self.slot(ColorSlot.INFO, text)

    # Pass-through formatting (not themed)

    def bold(self, text: Any) -> str:
        return self.style(text, C.BOLD)

    def dim(self, text: Any) -> str:
        return self.style(text, C.DIM)

    def italic(self, text: Any) -> str:
        return self.style(text, C.ITALIC)

    def gray(self, text: Any) -> str:
        return self.style(text, C.GRAY)
