"""
claude-pretty-printer: readable terminal output for Claude Agent SDK messages.

Usage:
    from claude_pretty import RenderConfig, format_message

    print(format_message(record, RenderConfig(layout="compact")))
"""
from .core import (
    MessagePrinter,
    MessageValidationError,
    RenderConfig,
    format_message,
    get_raw_text,
    validate_message,
)

__version__ = "1.0.0"

__all__ = [
    "MessagePrinter",
    "MessageValidationError",
    "RenderConfig",
    "format_message",
    "get_raw_text",
    "validate_message",
]
