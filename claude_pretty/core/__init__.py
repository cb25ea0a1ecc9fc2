"""
Core modules for claude-pretty-printer.

This package contains the rendering pipeline:
- cli.py: CLI entry point (stdin / file / inline input)
- cli_common.py: CLI argument builders
- constants.py: Centralized constants (colors, icons, limits)
- context.py: Render context resolved from the render configuration
- exceptions.py: Custom exceptions
- formatters.py: Per-kind message formatters
- hooks.py: Hook event formatters
- layouts.py: Layout modes
- logging_config.py: Logging setup
- output.py: Text utilities and box framing
- printer.py: Message printer (validation, dispatch, layout)
- schemas.py: Pydantic data models
- themes.py: Color themes and palette
- validation.py: Record validation
"""
from .context import RenderContext
from .exceptions import (
    InputError,
    MessageValidationError,
    PrettyPrinterError,
)
from .layouts import LAYOUT_NAMES, LayoutConfig, get_layout
from .output import (
    create_box,
    first_line,
    format_param_value,
    get_terminal_width,
    truncate_text,
)
from .printer import MessagePrinter, format_message, get_raw_text
from .schemas import (
    HookEventName,
    LayoutName,
    MessageKind,
    RenderConfig,
    ThemeName,
)
from .themes import THEME_NAMES, ColorSlot, Palette, get_theme, resolve_color
from .validation import validate_message

__all__ = [
    "ColorSlot",
    "HookEventName",
    "InputError",
    "LAYOUT_NAMES",
    "LayoutConfig",
    "LayoutName",
    "MessageKind",
    "MessagePrinter",
    "MessageValidationError",
    "Palette",
    "PrettyPrinterError",
    "RenderConfig",
    "RenderContext",
    "THEME_NAMES",
    "ThemeName",
    "create_box",
    "first_line",
    "format_message",
    "format_param_value",
    "get_layout",
    "get_raw_text",
    "get_terminal_width",
    "get_theme",
    "resolve_color",
    "truncate_text",
    "validate_message",
]
