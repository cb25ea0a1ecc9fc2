"""
Per-kind message formatters for claude-pretty-printer.

One formatter per message kind. Every formatter applies the same layout
precedence before doing any work:
- header layout: return "" (the header already says everything)
- minimal layout: return a single line capped at MINIMAL_CONTENT_LENGTH
- full/compact: full detail (framing is decided by the printer)

Formatters are pure functions of (message, RenderContext).
"""
import json
import logging
from typing import Any

from .constants import (
    HEADER_USER,
    HEADER_USER_TOOL_RESULTS,
    MINIMAL_CONTENT_LENGTH,
    StatusIcons,
)
from .context import RenderContext
from .hooks import format_hook_message
from .output import (
    first_line,
    format_cost,
    format_number,
    format_param_value,
    format_seconds,
    indent_lines,
)
from .schemas import (
    AssistantMessage,
    CompactBoundaryMessage,
    HookResponseMessage,
    ResultMessage,
    StreamEventMessage,
    SystemInitMessage,
    SystemMessage,
    UserMessage,
)
from .themes import ColorSlot, Palette

logger = logging.getLogger(__name__)

# Used to build single-line previews: truncating colored text could cut an
# escape sequence in half.
_PLAIN = Palette(enabled=False)

TODO_WRITE_TOOL = "TodoWrite"


def _one_line(text: str) -> str:
    """Collapse text onto one line and cap it for the minimal layout."""
    return first_line(" ".join(text.split("\n")), MINIMAL_CONTENT_LENGTH)


def _payload_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


# =============================================================================
# Assistant
# =============================================================================

def _format_todos(todos: list[Any], p: Palette) -> list[str]:
    lines: list[str] = []
    for todo in todos:
        if not isinstance(todo, dict):
            continue
        status = todo.get("status") or "pending"
        if status == "completed":
            icon = p.success(StatusIcons.SUCCESS)
        elif status == "in_progress":
            icon = p.warning(StatusIcons.IN_PROGRESS)
        else:
            icon = p.muted(StatusIcons.PENDING)
        label = todo.get("content") or todo.get("activeForm") or ""
        lines.append(f"    {icon} {label}")
    return lines


def _format_tool_use(block: dict[str, Any], ctx: RenderContext) -> list[str]:
    """
    Format a tool invocation block.

    Args:
        block: tool_use content block with 'name' and 'input'.
        ctx: Render context.

    Returns:
        Lines for the tool name and, if the layout allows, its parameters.
    """
    p = ctx.palette
    name = str(block.get("name") or "unknown")
    lines = [f"\n{p.primary(StatusIcons.ARROW_RIGHT)} {p.bold(name)}"]

    tool_input = block.get("input")
    if not ctx.show_tool_params or not isinstance(tool_input, dict):
        return lines

    for key, value in tool_input.items():
        if name == TODO_WRITE_TOOL and key == "todos" and isinstance(value, list):
            lines.append(f"  {p.muted(key)}:")
            lines.extend(_format_todos(value, p))
        else:
            lines.append(f"  {p.muted(key)}: {format_param_value(value)}")
    return lines


def _collect_thinking(message: AssistantMessage) -> str:
    """Join thinking content blocks and the trailing thinking list."""
    parts: list[str] = []
    for block in message.message.content:
        if isinstance(block, dict) and block.get("type") == "thinking":
            parts.append(str(block.get("thinking") or ""))
    for block in message.message.thinking or []:
        if isinstance(block, dict) and block.get("type") == "text":
            parts.append(str(block.get("text") or ""))
    return "\n".join(part for part in parts if part)


def format_assistant_message(message: AssistantMessage, ctx: RenderContext) -> str:
    """
    Format an assistant turn: text, tool calls, then thinking.

    Args:
        message: Validated assistant record.
        ctx: Render context.

    Returns:
        Rendered content.
    """
    if ctx.is_header:
        return ""

    if ctx.is_minimal:
        parts: list[str] = []
        for block in message.message.content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text") or ""))
            elif isinstance(block, dict) and block.get("type") == "tool_use":
                parts.append(f"{StatusIcons.ARROW_RIGHT} {block.get('name') or 'unknown'}")
        return _one_line(" ".join(part for part in parts if part))

    p = ctx.palette
    lines: list[str] = []
    for block in message.message.content:
        if isinstance(block, str):
            lines.append(block)
        elif not isinstance(block, dict):
            continue
        elif block.get("type") == "text":
            lines.append(str(block.get("text") or ""))
        elif block.get("type") == "tool_use":
            lines.extend(_format_tool_use(block, ctx))

    thinking = _collect_thinking(message)
    if thinking:
        lines.append(f"\n{p.muted(p.italic('[Thinking]'))}\n{p.muted(thinking)}")

    return "\n".join(lines)


# =============================================================================
# User
# =============================================================================

def _format_tool_result(block: dict[str, Any], p: Palette) -> list[str]:
    is_error = bool(block.get("is_error"))
    icon = p.error(StatusIcons.FAILURE) if is_error else p.success(StatusIcons.SUCCESS)
    tool_use_id = block.get("tool_use_id") or ""
    lines = [f"\n{icon} {p.muted(f'Tool result: {tool_use_id}')}"]

    content = block.get("content")
    if isinstance(content, str):
        lines.append(content)
    elif isinstance(content, list):
        for sub in content:
            if not isinstance(sub, dict):
                continue
            if sub.get("type") == "text":
                lines.append(str(sub.get("text") or ""))
            elif sub.get("type") == "image":
                lines.append(p.muted("[Image result]"))

    if is_error:
        lines.append(p.error(f"{StatusIcons.FAILURE} Error in tool execution"))
    return lines


def _user_lines(content: Any, p: Palette) -> tuple[list[str], bool]:
    """Render user content blocks; also reports whether tool results were seen."""
    if isinstance(content, str):
        return [content], False

    lines: list[str] = []
    has_tool_results = False
    for block in content:
        if isinstance(block, str):
            lines.append(block)
        elif not isinstance(block, dict):
            continue
        elif block.get("type") == "text":
            lines.append(str(block.get("text") or ""))
        elif block.get("type") == "image":
            lines.append(p.muted("[Image]"))
        elif block.get("type") == "tool_result":
            has_tool_results = True
            lines.extend(_format_tool_result(block, p))
    return lines, has_tool_results


def format_user_message(message: UserMessage, ctx: RenderContext) -> tuple[str, str]:
    """
    Format a user turn.

    Replayed records render as nothing (header included) since the original
    turn was already shown.

    Args:
        message: Validated user record.
        ctx: Render context.

    Returns:
        (header, content); the header depends on whether tool results
        are present.
    """
    if message.is_replay:
        return "", ""

    p = ctx.palette
    palette = _PLAIN if ctx.is_minimal else p
    lines, has_tool_results = _user_lines(message.message.content, palette)

    label = HEADER_USER_TOOL_RESULTS if has_tool_results else HEADER_USER
    header = p.slot(ColorSlot.USER, label)

    if ctx.is_header:
        return header, ""

    if ctx.is_minimal:
        return header, _one_line(" ".join(lines))

    body = "\n".join(lines)
    if message.is_synthetic:
        body = f"{p.muted('[Synthetic]')} {body}"
    return header, body


# =============================================================================
# Result
# =============================================================================

def _format_statistics(message: ResultMessage, p: Palette) -> list[str]:
    lines = [
        f"\n{p.bold('Statistics:')}",
        f"  {p.muted('Duration:')} {format_seconds(message.duration_ms)}",
        f"  {p.muted('API Time:')} {format_seconds(message.duration_api_ms)}",
        f"  {p.muted('Turns:')} {message.num_turns or 0}",
        f"  {p.muted('Cost:')} {p.warning(format_cost(message.total_cost_usd))}",
    ]

    usage = message.usage
    lines.append(f"\n{p.bold('Token Usage:')}")
    lines.append(f"  {p.muted('Input:')} {format_number(usage.input_tokens)}")
    lines.append(f"  {p.muted('Output:')} {format_number(usage.output_tokens)}")
    if usage.cache_read_input_tokens:
        lines.append(
            f"  {p.muted('Cache Read:')} {p.secondary(format_number(usage.cache_read_input_tokens))}"
        )
    if usage.cache_creation_input_tokens:
        lines.append(
            f"  {p.muted('Cache Creation:')} {format_number(usage.cache_creation_input_tokens)}"
        )

    if message.model_usage:
        lines.append(f"\n{p.bold('Per-Model Usage:')}")
        for model, model_usage in message.model_usage.items():
            lines.append(f"  {p.primary(model)}:")
            lines.append(f"    {p.muted('Input:')} {format_number(model_usage.input_tokens)}")
            lines.append(f"    {p.muted('Output:')} {format_number(model_usage.output_tokens)}")
            if model_usage.cache_read_input_tokens:
                cache_read = format_number(model_usage.cache_read_input_tokens)
                lines.append(f"    {p.muted('Cache Read:')} {p.secondary(cache_read)}")
            if model_usage.cache_creation_input_tokens:
                cache_creation = format_number(model_usage.cache_creation_input_tokens)
                lines.append(f"    {p.muted('Cache Creation:')} {cache_creation}")
            lines.append(
                f"    {p.muted('Cost:')} {p.warning(format_cost(model_usage.cost_usd))}"
            )

    if message.permission_denials:
        count = len(message.permission_denials)
        lines.append(f"\n{p.bold(p.error('Permission Denials:'))} {count}")
        for denial in message.permission_denials:
            lines.append(
                f"  {p.error(StatusIcons.BULLET)} {denial.tool_name} "
                f"{p.muted(f'({denial.tool_use_id})')}"
            )

    return lines


def format_result_message(message: ResultMessage, ctx: RenderContext) -> str:
    """
    Format the terminal result of a run, with optional statistics.

    Args:
        message: Validated result record.
        ctx: Render context.

    Returns:
        Rendered content.
    """
    if ctx.is_header:
        return ""

    p = ctx.palette
    succeeded = message.subtype == "success"

    if ctx.is_minimal:
        icon = p.success(StatusIcons.SUCCESS) if succeeded else p.error(StatusIcons.FAILURE)
        subtype = first_line(message.subtype, MINIMAL_CONTENT_LENGTH)
        return f"{icon} {subtype} {p.warning(format_cost(message.total_cost_usd))}"

    lines: list[str] = []
    if succeeded:
        lines.append(p.success(f"{StatusIcons.SUCCESS} Task completed successfully"))
        lines.append(f"\n{p.bold('Result:')} {_payload_text(message.result)}")
    elif message.subtype == "error_max_turns":
        lines.append(p.error(f"{StatusIcons.FAILURE} Error: Maximum turns reached"))
    elif message.subtype == "error_during_execution":
        lines.append(p.error(f"{StatusIcons.FAILURE} Error during execution"))
    else:
        lines.append(p.error(f"{StatusIcons.FAILURE} Error: {message.subtype}"))

    if ctx.show_stats:
        lines.extend(_format_statistics(message, p))

    return "\n".join(lines)


# =============================================================================
# System
# =============================================================================

def _mcp_status_icon(status: str, p: Palette) -> str:
    if status == "connected":
        return p.success(StatusIcons.SUCCESS)
    if status == "failed":
        return p.error(StatusIcons.FAILURE)
    if status == "needs-auth":
        return p.warning(StatusIcons.WARNING)
    return p.muted(StatusIcons.PENDING)


def _format_init(message: SystemInitMessage, ctx: RenderContext) -> str:
    p = ctx.palette

    if ctx.is_minimal:
        model = message.model or "unknown model"
        return _one_line(f"Session initialized ({model}, {len(message.tools)} tools)")

    lines = [f"\n{p.bold('Claude Code Session Initialized')}"]

    # Absent metadata fields are left out
    details = [
        ("Session ID:", message.session_id),
        ("Version:", message.claude_code_version),
        ("Model:", p.primary(message.model) if message.model else None),
        ("Working Directory:", message.cwd),
        ("Permission Mode:", message.permission_mode),
        ("API Key Source:", message.api_key_source),
    ]
    present = [f"{p.muted(label)} {value}" for label, value in details if value]
    if present:
        present[0] = f"\n{present[0]}"
        lines.extend(present)

    if message.tools:
        lines.append(f"\n{p.muted('Available Tools:')} {len(message.tools)}")

    if message.mcp_servers:
        lines.append(f"\n{p.bold('MCP Servers:')}")
        for server in message.mcp_servers:
            icon = _mcp_status_icon(server.status, p)
            lines.append(f"  {icon} {server.name} {p.muted(f'({server.status})')}")

    if message.slash_commands:
        lines.append(f"\n{p.muted('Slash Commands:')} {', '.join(message.slash_commands)}")

    if message.agents:
        lines.append(f"\n{p.muted('Agents:')} {', '.join(message.agents)}")

    if message.skills:
        lines.append(f"\n{p.muted('Skills:')} {', '.join(message.skills)}")

    return "\n".join(lines)


def _format_compact_boundary(message: CompactBoundaryMessage, ctx: RenderContext) -> str:
    p = ctx.palette
    metadata = message.compact_metadata
    icon = p.warning(StatusIcons.LIGHTNING)

    if ctx.is_minimal:
        return (
            f"{icon} Conversation compacted "
            f"({first_line(metadata.trigger, 20)}, {format_number(metadata.pre_tokens)} tokens)"
        )

    return "\n".join([
        f"\n{icon} {p.bold('Conversation Compacted')} {p.muted(f'({metadata.trigger})')}",
        f"   {p.muted('Previous tokens:')} {format_number(metadata.pre_tokens)}",
    ])


def _format_hook_fallback(message: HookResponseMessage, ctx: RenderContext) -> str:
    """Generic rendering of a hook response: name, event, stdout, stderr, exit code."""
    p = ctx.palette
    name = message.hook_name or "Unknown"
    event = message.hook_event or "unknown"

    if ctx.is_minimal:
        exit_code = "" if message.exit_code is None else f" exit {message.exit_code}"
        summary = first_line(f"{name} ({event}){exit_code}", MINIMAL_CONTENT_LENGTH)
        return f"{p.primary(StatusIcons.GEAR)} Hook: {summary}"

    lines = [
        f"\n{p.primary(StatusIcons.GEAR)} {p.bold('Hook:')} {name} {p.muted(f'({event})')}"
    ]

    if message.stdout:
        lines.append(f"\n{p.muted('stdout:')}")
        lines.append(indent_lines(message.stdout))

    if message.stderr:
        lines.append(f"\n{p.muted('stderr:')}")
        lines.append(p.error(indent_lines(message.stderr)))

    if message.exit_code is not None:
        if message.exit_code == 0:
            icon = p.success(StatusIcons.SUCCESS)
        else:
            icon = p.error(StatusIcons.FAILURE)
        lines.append(f"\n{icon} {p.muted('Exit code:')} {message.exit_code}")

    return "\n".join(lines)


def _format_hook_response(message: HookResponseMessage, ctx: RenderContext) -> str:
    if message.hook_event:
        content = format_hook_message(
            message.hook_event,
            message.model_dump(by_alias=True),
            ctx,
        )
        if content is not None:
            return content
    return _format_hook_fallback(message, ctx)


def format_system_message(message: SystemMessage, ctx: RenderContext) -> str:
    """
    Format a system record by subtype.

    Args:
        message: Validated system record (init, compact_boundary,
            hook_response, or any other subtype).
        ctx: Render context.

    Returns:
        Rendered content.
    """
    if ctx.is_header:
        return ""

    if isinstance(message, SystemInitMessage):
        return _format_init(message, ctx)
    if isinstance(message, CompactBoundaryMessage):
        return _format_compact_boundary(message, ctx)
    if isinstance(message, HookResponseMessage):
        return _format_hook_response(message, ctx)

    logger.debug(f"Unknown system message subtype: {message.subtype}")
    return ctx.palette.muted("[Unknown system message subtype]")


# =============================================================================
# Stream Events
# =============================================================================

def format_stream_event(message: StreamEventMessage) -> str:
    """
    Extract incremental text from a streaming delta.

    Args:
        message: Validated stream_event record.

    Returns:
        Delta text for text_delta, partial JSON for input_json_delta,
        "" for every other event.
    """
    event = message.event
    delta = event.get("delta")
    if not isinstance(delta, dict):
        return ""

    kind = delta.get("type") or event.get("type")
    if kind == "text_delta":
        text = delta.get("text")
    elif kind == "input_json_delta":
        text = delta.get("partial_json")
    else:
        return ""
    return text if isinstance(text, str) else ""
