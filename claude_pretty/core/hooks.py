"""
Hook event formatting for claude-pretty-printer.

Renders the payload of a ``system``/``hook_response`` record according to
the lifecycle event that fired it (PreToolUse, SessionStart, ...).

Each event has a typed payload model and a formatter honoring the same
layout split as the message formatters:
- header layout: empty (the message header carries everything)
- minimal layout: one line
- full/compact: multi-line detail

format_hook_message() returns None when the event name is unknown or the
payload does not fit the event's shape; callers use that to select their
generic fallback rendering.

Usage:
    from .hooks import format_hook_message

    content = format_hook_message("PreToolUse", record_dict, ctx)
    if content is None:
        content = generic_rendering(...)
"""
import json
import logging
from typing import Any, Callable, Optional

from pydantic import BaseModel, ValidationError

from .constants import (
    HOOK_PROMPT_MAX_LENGTH,
    HOOK_PROMPT_MINIMAL_LENGTH,
    HOOK_RESPONSE_MAX_LENGTH,
    HookIcons,
    MINIMAL_CONTENT_LENGTH,
)
from .context import RenderContext
from .output import first_line
from .schemas import (
    HookEventName,
    NotificationHookInput,
    PostToolUseHookInput,
    PreCompactHookInput,
    PreToolUseHookInput,
    SessionEndHookInput,
    SessionStartHookInput,
    StopHookInput,
    SubagentStopHookInput,
    UserPromptSubmitHookInput,
)

logger = logging.getLogger(__name__)


def _to_text(value: Any) -> str:
    """Strings as-is, everything else as indented JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def _cwd_line(cwd: Optional[str], ctx: RenderContext) -> list[str]:
    if not cwd:
        return []
    return [f"   {ctx.palette.muted('Working directory:')} {cwd}"]


def _transcript_line(path: Optional[str], ctx: RenderContext, lead: str = "") -> list[str]:
    if not path:
        return []
    return [f"{lead}   {ctx.palette.muted('Transcript:')} {path}"]


# =============================================================================
# Tool Hooks
# =============================================================================

def format_pre_tool_use(hook: PreToolUseHookInput, ctx: RenderContext) -> str:
    p = ctx.palette
    icon = p.secondary(HookIcons.PRE_TOOL_USE)

    if ctx.is_minimal:
        return f"{icon} Pre-Tool: {p.primary(first_line(hook.tool_name))}"

    lines = [f"\n{icon} {p.bold('Pre-Tool Use:')} {p.primary(hook.tool_name)}"]
    lines.extend(_cwd_line(hook.cwd, ctx))

    if hook.tool_input:
        lines.append(f"\n{p.muted('Tool input:')}")
        lines.append(
            "\n".join(f"  {p.gray(line)}" for line in _to_text(hook.tool_input).split("\n"))
        )

    return "\n".join(lines)


def format_post_tool_use(hook: PostToolUseHookInput, ctx: RenderContext) -> str:
    p = ctx.palette
    icon = p.success(HookIcons.POST_TOOL_USE)

    if ctx.is_minimal:
        return f"{icon} Post-Tool: {p.primary(first_line(hook.tool_name))}"

    lines = [f"\n{icon} {p.bold('Post-Tool Use:')} {p.primary(hook.tool_name)}"]
    lines.extend(_cwd_line(hook.cwd, ctx))

    # An explicit null response is still shown
    if "tool_response" in hook.model_fields_set:
        lines.append(f"\n{p.muted('Tool response:')}")
        response = _to_text(hook.tool_response)
        truncated = ""
        if len(response) > HOOK_RESPONSE_MAX_LENGTH:
            response = response[:HOOK_RESPONSE_MAX_LENGTH]
            truncated = p.muted("... (truncated)")
        rendered = [f"  {p.gray(line)}" for line in response.split("\n")]
        rendered[-1] += truncated
        lines.append("\n".join(rendered))

    return "\n".join(lines)


# =============================================================================
# Conversation Hooks
# =============================================================================

def format_notification(hook: NotificationHookInput, ctx: RenderContext) -> str:
    p = ctx.palette
    icon = p.warning(HookIcons.NOTIFICATION)

    if ctx.is_minimal:
        return f"{icon} {first_line(hook.title or 'Notification')}"

    lines = [f"\n{icon} {p.bold('Notification')}"]
    if hook.title:
        lines.append(f"   {p.primary(hook.title)}")

    if hook.message:
        lines.append(f"\n{p.muted('Message:')}")
        lines.append("\n".join(f"  {line}" for line in hook.message.split("\n")))

    if hook.cwd:
        lines.append(f"\n   {p.muted('Location:')} {hook.cwd}")

    return "\n".join(lines)


def format_user_prompt_submit(hook: UserPromptSubmitHookInput, ctx: RenderContext) -> str:
    p = ctx.palette
    icon = p.accent(HookIcons.USER_PROMPT_SUBMIT)
    prompt = hook.prompt or ""

    if ctx.is_minimal:
        preview = prompt[:HOOK_PROMPT_MINIMAL_LENGTH].replace("\n", " ")
        suffix = "..." if len(prompt) > HOOK_PROMPT_MINIMAL_LENGTH else ""
        return f"{icon} Prompt: {preview}{suffix}"

    lines = [f"\n{icon} {p.bold('User Prompt Submitted')}"]
    lines.extend(_cwd_line(hook.cwd, ctx))

    if prompt:
        lines.append(f"\n{p.muted('Prompt:')}")
        truncated = ""
        if len(prompt) > HOOK_PROMPT_MAX_LENGTH:
            prompt = prompt[:HOOK_PROMPT_MAX_LENGTH]
            truncated = p.muted("... (truncated)")
        lines.append("\n".join(f"  {line}" for line in prompt.split("\n")) + truncated)

    return "\n".join(lines)


# =============================================================================
# Session Hooks
# =============================================================================

def format_session_start(hook: SessionStartHookInput, ctx: RenderContext) -> str:
    p = ctx.palette
    source_icons = {
        "startup": p.success(HookIcons.SESSION_STARTUP),
        "resume": p.secondary(HookIcons.SESSION_RESUME),
        "clear": p.warning(HookIcons.SESSION_CLEAR),
        "compact": p.info(HookIcons.SESSION_COMPACT),
    }
    source = hook.source or "unknown"
    icon = source_icons.get(source, p.muted(HookIcons.SESSION_OTHER))

    if ctx.is_minimal:
        return f"{icon} Session started ({first_line(source)})"

    lines = [f"\n{icon} {p.bold('Session Started')} {p.muted(f'({source})')}"]
    lines.extend(_transcript_line(hook.transcript_path, ctx))
    lines.extend(_cwd_line(hook.cwd, ctx))
    if hook.permission_mode:
        lines.append(f"   {p.muted('Permission mode:')} {hook.permission_mode}")

    return "\n".join(lines)


def format_session_end(hook: SessionEndHookInput, ctx: RenderContext) -> str:
    p = ctx.palette
    icon = p.error(HookIcons.SESSION_END)

    if ctx.is_minimal:
        reason = f" ({first_line(hook.reason)})" if hook.reason else ""
        return f"{icon} Session ended{reason}"

    lines = [f"\n{icon} {p.bold('Session Ended')}"]
    if hook.reason:
        lines.append(f"   {p.muted('Reason:')} {p.warning(hook.reason)}")
    lines.extend(_transcript_line(hook.transcript_path, ctx))
    lines.extend(_cwd_line(hook.cwd, ctx))

    return "\n".join(lines)


def _format_stop(hook: StopHookInput, ctx: RenderContext, label: str, title: str) -> str:
    p = ctx.palette
    if hook.stop_hook_active:
        icon = p.warning(HookIcons.STOP_ACTIVE)
    else:
        icon = p.error(HookIcons.STOP_INACTIVE)

    if ctx.is_minimal:
        state = "active" if hook.stop_hook_active else "inactive"
        return f"{icon} {label} {state}"

    lines = [f"\n{icon} {p.bold(title)}"]
    if hook.stop_hook_active:
        lines.append(f"   {p.warning('Stop hook is active')}")
    else:
        lines.append(f"   {p.muted('Stop hook is inactive')}")
    lines.extend(_cwd_line(hook.cwd, ctx))
    lines.extend(_transcript_line(hook.transcript_path, ctx))

    return "\n".join(lines)


def format_stop(hook: StopHookInput, ctx: RenderContext) -> str:
    return _format_stop(hook, ctx, "Stop hook", "Stop Hook Triggered")


def format_subagent_stop(hook: SubagentStopHookInput, ctx: RenderContext) -> str:
    return _format_stop(hook, ctx, "Subagent stop", "Subagent Stop Hook Triggered")


def format_pre_compact(hook: PreCompactHookInput, ctx: RenderContext) -> str:
    p = ctx.palette
    trigger_icons = {
        "manual": p.secondary(HookIcons.COMPACT_MANUAL),
        "auto": p.info(HookIcons.COMPACT_AUTO),
    }
    trigger = hook.trigger or "unknown"
    icon = trigger_icons.get(trigger, p.muted(HookIcons.COMPACT_OTHER))

    if ctx.is_minimal:
        return f"{icon} Pre-compaction ({first_line(trigger)})"

    lines = [f"\n{icon} {p.bold('Pre-Compaction')} {p.muted(f'({trigger})')}"]
    if hook.custom_instructions:
        lines.append(f"\n{p.muted('Custom instructions:')}")
        lines.append(
            "\n".join(
                f"  {p.primary(line)}" for line in hook.custom_instructions.split("\n")
            )
        )
    else:
        lines.append(f"   {p.muted('No custom instructions')}")
    lines.extend(_transcript_line(hook.transcript_path, ctx, lead="\n"))
    lines.extend(_cwd_line(hook.cwd, ctx))

    return "\n".join(lines)


# =============================================================================
# Router
# =============================================================================

HookFormatter = Callable[[Any, RenderContext], str]

HOOK_FORMATTERS: dict[str, tuple[type[BaseModel], HookFormatter]] = {
    HookEventName.PRE_TOOL_USE: (PreToolUseHookInput, format_pre_tool_use),
    HookEventName.POST_TOOL_USE: (PostToolUseHookInput, format_post_tool_use),
    HookEventName.NOTIFICATION: (NotificationHookInput, format_notification),
    HookEventName.USER_PROMPT_SUBMIT: (UserPromptSubmitHookInput, format_user_prompt_submit),
    HookEventName.SESSION_START: (SessionStartHookInput, format_session_start),
    HookEventName.SESSION_END: (SessionEndHookInput, format_session_end),
    HookEventName.STOP: (StopHookInput, format_stop),
    HookEventName.SUBAGENT_STOP: (SubagentStopHookInput, format_subagent_stop),
    HookEventName.PRE_COMPACT: (PreCompactHookInput, format_pre_compact),
}


def format_hook_message(
    event_name: str,
    data: dict[str, Any],
    ctx: RenderContext,
) -> Optional[str]:
    """
    Render a hook payload by event name.

    Args:
        event_name: Hook event name, matched exactly (e.g. "PreToolUse").
        data: Raw hook fields (the hook_response record's keys).
        ctx: Render context.

    Returns:
        Rendered content ("" in header layout), or None if the event is
        not supported or the payload does not match its shape.
    """
    entry = HOOK_FORMATTERS.get(event_name)
    if entry is None:
        logger.debug(f"Unsupported hook event '{event_name}', using generic rendering")
        return None

    model, formatter = entry
    try:
        hook = model.model_validate(data)
    except ValidationError as e:
        logger.debug(f"Malformed {event_name} hook payload, using generic rendering: {e}")
        return None

    if ctx.is_header:
        return ""
    return formatter(hook, ctx)
