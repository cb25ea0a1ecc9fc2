"""
Output formatting utilities for claude-pretty-printer.

Pure string helpers shared by all formatters:
- Terminal width detection
- Truncation and first-line extraction
- Compact serialization of tool parameter values
- Box framing of header + body

Usage:
    from .output import (
        create_box,
        first_line,
        format_number,
        format_param_value,
        get_terminal_width,
        truncate_text,
    )
"""
import json
import shutil
from typing import Any, Optional

from .constants import (
    BoxChars,
    DEFAULT_TERMINAL_WIDTH,
    MINIMAL_CONTENT_LENGTH,
    PARAM_ARRAY_PREVIEW_ITEMS,
    PARAM_JSON_MAX_LENGTH,
    PARAM_STRING_MAX_LENGTH,
)
from .themes import Palette


# =============================================================================
# Terminal Utilities
# =============================================================================

def get_terminal_width() -> int:
    """
    Get terminal width.

    Returns:
        Detected column count, or DEFAULT_TERMINAL_WIDTH when unavailable.
    """
    columns = shutil.get_terminal_size(
        fallback=(DEFAULT_TERMINAL_WIDTH, 24)
    ).columns
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


def create_line(char: str = BoxChars.HORIZONTAL, width: Optional[int] = None) -> str:
    """Create a horizontal line of the given character."""
    return char * (width or get_terminal_width())


# =============================================================================
# Text Formatting Utilities
# =============================================================================

def truncate_text(text: str, max_len: int) -> str:
    """
    Truncate text with ellipsis.

    Args:
        text: Text to truncate.
        max_len: Maximum length; 0 or less disables truncation.

    Returns:
        The text unchanged if it fits, else its first max_len-3 characters
        followed by '...'.
    """
    if max_len <= 0 or len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


def first_line(text: str, max_len: int = MINIMAL_CONTENT_LENGTH) -> str:
    """
    Get the first line of text, stripped and truncated.

    Args:
        text: Possibly multi-line text.
        max_len: Maximum length of the returned line.

    Returns:
        Single-line preview.
    """
    line = text.split("\n", 1)[0] if text else ""
    return truncate_text(line.strip(), max_len)


def indent_lines(text: str, prefix: str = "  ") -> str:
    """Prefix every line of text."""
    return "\n".join(f"{prefix}{line}" for line in text.split("\n"))


def format_number(value: Any) -> str:
    """
    Format a count with thousands separators.

    Args:
        value: Integer-like count (None counts as 0).

    Returns:
        Formatted string (e.g., "12,345").
    """
    if not value:
        return "0"
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,}"
    return f"{int(value):,}"


def format_cost(cost: Optional[float]) -> str:
    """Format a USD cost with four decimals (e.g., "$0.0042")."""
    return f"${(cost or 0):.4f}"


def format_seconds(duration_ms: Optional[float]) -> str:
    """Format milliseconds as seconds with two decimals (e.g., "1.50s")."""
    return f"{(duration_ms or 0) / 1000:.2f}s"


def _json_compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def format_param_value(value: Any) -> str:
    """
    Format a tool parameter value in a compact, readable way.

    Total over any JSON-like value: never raises.

    Args:
        value: Arbitrary parameter value.

    Returns:
        Compact single-line representation.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        if len(value) > PARAM_STRING_MAX_LENGTH:
            return f'"{value[:PARAM_STRING_MAX_LENGTH - 3]}..."'
        return f'"{value}"'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        shown = ", ".join(
            format_param_value(item) for item in value[:PARAM_ARRAY_PREVIEW_ITEMS]
        )
        if len(value) <= PARAM_ARRAY_PREVIEW_ITEMS:
            return f"[{shown}]"
        return f"[{shown}, ... +{len(value) - PARAM_ARRAY_PREVIEW_ITEMS} more]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        if len(value) == 1:
            key, item = next(iter(value.items()))
            return f"{{ {key}: {format_param_value(item)} }}"
        try:
            compact = _json_compact(value)
        except (TypeError, ValueError):
            compact = ""
        if compact and len(compact) <= PARAM_JSON_MAX_LENGTH:
            return compact
        return f"{{ {len(value)} properties }}"
    return str(value)


# =============================================================================
# Box Rendering
# =============================================================================

def create_box(
    header: str,
    body: str,
    show_box: bool,
    palette: Palette,
    width: Optional[int] = None,
) -> str:
    """
    Frame a header and body between two muted horizontal rules.

    When framing is disabled, degrades to the header alone (blank body)
    or the header followed by the body on the next line.

    Args:
        header: Colored header line.
        body: Message content.
        show_box: Whether the active layout frames messages.
        palette: Palette used for the rule color.
        width: Rule width; detected from the terminal when None.

    Returns:
        Assembled string.
    """
    if not show_box:
        if body.strip():
            return f"{header}\n{body}"
        return header

    rule = palette.muted(create_line(BoxChars.HORIZONTAL, width))
    return f"{rule}\n{header}\n{body}\n{rule}"
