"""
Message printer: the entry point of the rendering pipeline.

Validates a record, dispatches it to the formatter for its kind, picks the
header, then applies the layout (header only, single line, or boxed).

Usage:
    from .printer import MessagePrinter, format_message

    printer = MessagePrinter(RenderConfig(layout="compact"))
    for record in records:
        text = printer.format(record)
        if text.strip():
            print(text)

    # Or one-off, with the default configuration
    format_message({"type": "result", "subtype": "success", "result": "Done"})
"""
import json
import logging
from typing import Any, Optional

from .constants import (
    HEADER_ASSISTANT,
    HEADER_RESULT,
    HEADER_SYSTEM,
    HEADER_UNKNOWN,
    MINIMAL_CONTENT_LENGTH,
)
from .context import RenderContext
from .formatters import (
    format_assistant_message,
    format_result_message,
    format_stream_event,
    format_system_message,
    format_user_message,
)
from .output import create_box, first_line
from .schemas import (
    AssistantMessage,
    RenderConfig,
    ResultMessage,
    StreamEventMessage,
    SystemMessage,
    UserMessage,
)
from .themes import ColorSlot
from .validation import validate_message

logger = logging.getLogger(__name__)


class MessagePrinter:
    """
    Formats records with a fixed render configuration.

    Args:
        config: Render configuration; defaults to full layout, default theme.
    """

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.ctx = RenderContext.from_config(config)

    @property
    def config(self) -> RenderConfig:
        return self.ctx.config

    def should_show(self, record: Any) -> bool:
        """Apply the kind filter (no filter keeps everything)."""
        filter_types = self.config.filter_types
        if not filter_types:
            return True
        return isinstance(record, dict) and record.get("type") in filter_types

    def format(self, record: Any, show_box: bool = True) -> str:
        """
        Format a record for terminal output.

        Args:
            record: Parsed JSON record.
            show_box: Whether to frame the message (when the layout allows).

        Returns:
            Formatted string; blank means nothing should be printed.

        Raises:
            MessageValidationError: If the record lacks required fields.
        """
        message = validate_message(record)
        ctx = self.ctx
        p = ctx.palette

        if isinstance(message, StreamEventMessage):
            # Stream deltas are printed raw, without header or box
            return format_stream_event(message)

        if isinstance(message, AssistantMessage):
            header = p.slot(ColorSlot.ASSISTANT, HEADER_ASSISTANT)
            content = format_assistant_message(message, ctx)
        elif isinstance(message, UserMessage):
            header, content = format_user_message(message, ctx)
        elif isinstance(message, ResultMessage):
            header = p.slot(ColorSlot.RESULT, HEADER_RESULT)
            content = format_result_message(message, ctx)
        elif isinstance(message, SystemMessage):
            header = p.slot(ColorSlot.SYSTEM, HEADER_SYSTEM)
            content = format_system_message(message, ctx)
        else:
            header = p.slot(ColorSlot.ERROR, HEADER_UNKNOWN)
            content = f"[Unknown message type: {message.type}]"
            if ctx.is_minimal:
                content = first_line(content, MINIMAL_CONTENT_LENGTH)

        if ctx.is_header:
            return header

        if ctx.is_minimal:
            if content.strip():
                return f"{header} {content}"
            return header

        if not show_box or not content.strip():
            return content

        return create_box(
            header,
            content,
            show_box=ctx.layout.show_box,
            palette=p,
            width=self.config.width,
        )


def format_message(
    record: Any,
    config: Optional[RenderConfig] = None,
    show_box: bool = True,
) -> str:
    """
    Format a single record.

    Args:
        record: Parsed JSON record.
        config: Render configuration (defaults when None).
        show_box: Whether to frame the message (when the layout allows).

    Returns:
        Formatted string; blank means nothing should be printed.

    Raises:
        MessageValidationError: If the record lacks required fields.
    """
    return MessagePrinter(config).format(record, show_box=show_box)


def _json_text(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def get_raw_text(record: Any) -> str:
    """
    Extract the raw, unstyled text of a record.

    Args:
        record: Parsed JSON record.

    Returns:
        Text content, or "" when the record carries none.

    Raises:
        MessageValidationError: If the record lacks required fields.
    """
    message = validate_message(record)

    if isinstance(message, AssistantMessage):
        parts: list[str] = []
        for block in message.message.content:
            if not isinstance(block, dict):
                continue
            if block.get("type") == "text" and block.get("text"):
                parts.append(str(block["text"]))
            elif block.get("type") == "tool_use":
                parts.append(f"[Tool: {block.get('name')}]")
        return "\n".join(parts)

    if isinstance(message, UserMessage):
        content = message.message.content
        return content if isinstance(content, str) else _json_text(content)

    if isinstance(message, ResultMessage):
        if message.result is None or message.result == "":
            return ""
        if isinstance(message.result, str):
            return message.result
        return _json_text(message.result)

    if isinstance(message, StreamEventMessage):
        return format_stream_event(message)

    if isinstance(message, SystemMessage):
        system_text = getattr(message, "system", None)
        return system_text if isinstance(system_text, str) else ""

    return ""
