"""
Centralized constants for claude-pretty-printer.

All magic numbers, strings, and glyphs used by the renderer are defined here.

Usage:
    from .constants import (
        AnsiColors,
        BoxChars,
        StatusIcons,
        HookIcons,
        MINIMAL_CONTENT_LENGTH,
    )
"""
from enum import StrEnum


# =============================================================================
# Logging Constants
# =============================================================================

# Log format for file-based logging
LOG_FORMAT_FILE: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Log format for colored console (using colorlog)
LOG_FORMAT_COLORED: str = (
    "%(log_color)s%(levelname)-8s%(reset)s %(cyan)s%(name)s%(reset)s: %(message)s"
)

# Rotating file handler settings
LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT: int = 3

DEFAULT_LOG_LEVEL: str = "WARNING"


# =============================================================================
# ANSI Terminal Colors
# =============================================================================

class AnsiColors(StrEnum):
    """
    ANSI escape codes for terminal colors.

    Single source of truth for all color codes used in rendered output.
    Themes map their semantic slots onto these.
    """
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    ITALIC = "\033[3m"

    # Standard foreground colors
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    # Bright foreground colors
    GRAY = "\033[90m"


# =============================================================================
# Color Configuration for colorlog
# =============================================================================

COLORLOG_COLORS: dict[str, str] = {
    "DEBUG": "white",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


# =============================================================================
# Display Constants
# =============================================================================

# Fallback when the terminal width cannot be detected
DEFAULT_TERMINAL_WIDTH: int = 80

# Single-line content cap used by the minimal layout
MINIMAL_CONTENT_LENGTH: int = 80

# Tool parameter preview limits
PARAM_STRING_MAX_LENGTH: int = 100
PARAM_ARRAY_PREVIEW_ITEMS: int = 3
PARAM_JSON_MAX_LENGTH: int = 80

# Hook payload preview limits
HOOK_RESPONSE_MAX_LENGTH: int = 500
HOOK_PROMPT_MAX_LENGTH: int = 200
HOOK_PROMPT_MINIMAL_LENGTH: int = 40

# Message header labels
HEADER_ASSISTANT: str = "◆ ASSISTANT"
HEADER_USER: str = "◆ USER"
HEADER_USER_TOOL_RESULTS: str = "◆ USER (Tool Results)"
HEADER_RESULT: str = "◆ RESULT"
HEADER_SYSTEM: str = "◆ SYSTEM"
HEADER_UNKNOWN: str = "◆ UNKNOWN"


# =============================================================================
# Box Drawing Characters (Unicode)
# =============================================================================

class BoxChars:
    """Unicode box drawing characters for terminal output."""
    HORIZONTAL: str = "─"


# =============================================================================
# Status and Decoration Icons
# =============================================================================

class StatusIcons:
    """
    Unicode icons for status display.

    Single source of truth for all status indicators used in rendered output.
    """
    SUCCESS: str = "✓"
    FAILURE: str = "✗"
    WARNING: str = "⚠"
    PENDING: str = "○"
    IN_PROGRESS: str = "⋯"

    BULLET: str = "•"
    LIGHTNING: str = "⚡"
    GEAR: str = "⚙"
    ARROW_RIGHT: str = "→"


class HookIcons:
    """Icons for lifecycle hook callbacks."""
    PRE_TOOL_USE: str = "🔧"
    POST_TOOL_USE: str = "✅"
    NOTIFICATION: str = "🔔"
    USER_PROMPT_SUBMIT: str = "📝"
    SESSION_END: str = "🛑"
    STOP_ACTIVE: str = "⏸️"
    STOP_INACTIVE: str = "🛑"

    # SessionStart, keyed by source
    SESSION_STARTUP: str = "🚀"
    SESSION_RESUME: str = "▶️"
    SESSION_CLEAR: str = "🔄"
    SESSION_COMPACT: str = "📦"
    SESSION_OTHER: str = "📍"

    # PreCompact, keyed by trigger
    COMPACT_MANUAL: str = "👆"
    COMPACT_AUTO: str = "🤖"
    COMPACT_OTHER: str = "📦"
