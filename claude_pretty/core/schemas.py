"""
Data models for claude-pretty-printer.

Contains Pydantic models for the records emitted by the agent runtime
(one model per message kind, system subtype and hook event) and the
immutable render configuration.
"""
from enum import StrEnum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class MessageKind(StrEnum):
    """Discriminant values of the ``type`` field."""
    ASSISTANT = "assistant"
    USER = "user"
    RESULT = "result"
    SYSTEM = "system"
    STREAM_EVENT = "stream_event"


class SystemSubtype(StrEnum):
    """Subtypes of ``system`` records that get dedicated rendering."""
    INIT = "init"
    COMPACT_BOUNDARY = "compact_boundary"
    HOOK_RESPONSE = "hook_response"


class HookEventName(StrEnum):
    """Lifecycle hook events understood by the hook formatter."""
    PRE_TOOL_USE = "PreToolUse"
    POST_TOOL_USE = "PostToolUse"
    NOTIFICATION = "Notification"
    USER_PROMPT_SUBMIT = "UserPromptSubmit"
    SESSION_START = "SessionStart"
    SESSION_END = "SessionEnd"
    STOP = "Stop"
    SUBAGENT_STOP = "SubagentStop"
    PRE_COMPACT = "PreCompact"


class ThemeName(StrEnum):
    """Built-in color themes."""
    DEFAULT = "default"
    MONOKAI = "monokai"
    DRACULA = "dracula"
    NORD = "nord"


class LayoutName(StrEnum):
    """Built-in layout modes, from most to least verbose."""
    FULL = "full"
    COMPACT = "compact"
    MINIMAL = "minimal"
    HEADER = "header"


class _Record(BaseModel):
    """Base for all wire models: unknown keys are kept, aliases accepted."""
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        protected_namespaces=(),
    )


# =============================================================================
# Message Records
# =============================================================================

class SDKRecord(_Record):
    """Fields common to every record."""
    type: str = Field(description="Message kind discriminant")
    uuid: Optional[str] = None
    session_id: Optional[str] = None


class AssistantPayload(_Record):
    """The API message wrapped by an assistant record."""
    content: list[Any] = Field(
        default_factory=list,
        description="Content blocks (text, tool_use, thinking)"
    )
    thinking: Optional[list[Any]] = Field(
        default=None,
        description="Extended thinking blocks, rendered after the content"
    )


class AssistantMessage(SDKRecord):
    """An assistant turn."""
    message: AssistantPayload
    parent_tool_use_id: Optional[str] = None


class UserPayload(_Record):
    """The API message wrapped by a user record."""
    role: str = "user"
    content: Union[str, list[Any]] = ""


class UserMessage(SDKRecord):
    """A user turn, including tool results fed back to the model."""
    message: UserPayload
    parent_tool_use_id: Optional[str] = None
    is_replay: bool = Field(default=False, alias="isReplay")
    is_synthetic: bool = Field(default=False, alias="isSynthetic")


class TokenUsage(_Record):
    """
    Token usage statistics.

    Tracks input and output token counts, including cached tokens.
    """
    input_tokens: Optional[int] = Field(
        default=0,
        description="Number of input tokens processed"
    )
    output_tokens: Optional[int] = Field(
        default=0,
        description="Number of output tokens generated"
    )
    cache_creation_input_tokens: Optional[int] = Field(
        default=0,
        description="Number of tokens used to create cache"
    )
    cache_read_input_tokens: Optional[int] = Field(
        default=0,
        description="Number of tokens read from cache"
    )


class ModelUsage(_Record):
    """Per-model usage entry of a result record (camelCase on the wire)."""
    input_tokens: Optional[int] = Field(default=0, alias="inputTokens")
    output_tokens: Optional[int] = Field(default=0, alias="outputTokens")
    cache_read_input_tokens: Optional[int] = Field(
        default=0, alias="cacheReadInputTokens"
    )
    cache_creation_input_tokens: Optional[int] = Field(
        default=0, alias="cacheCreationInputTokens"
    )
    cost_usd: Optional[float] = Field(default=0.0, alias="costUSD")


class PermissionDenial(_Record):
    """A tool call the permission layer refused."""
    tool_name: str = ""
    tool_use_id: str = ""
    tool_input: Any = None


class ResultMessage(SDKRecord):
    """Terminal record of a run, with usage statistics."""
    subtype: str = Field(description="success, error_max_turns, error_during_execution")
    result: Any = None
    is_error: bool = False
    duration_ms: Optional[float] = 0
    duration_api_ms: Optional[float] = 0
    num_turns: Optional[int] = 0
    total_cost_usd: Optional[float] = 0.0
    usage: TokenUsage = Field(default_factory=TokenUsage)
    model_usage: dict[str, ModelUsage] = Field(
        default_factory=dict,
        alias="modelUsage",
        description="Usage broken down by model name"
    )
    permission_denials: list[PermissionDenial] = Field(default_factory=list)


class SystemMessage(SDKRecord):
    """A system record; subtypes without dedicated rendering stay at this level."""
    subtype: str


class McpServerStatus(_Record):
    """Connection state of one MCP server."""
    name: str = ""
    status: str = ""


class SystemInitMessage(SystemMessage):
    """Session metadata emitted once at start-up."""
    claude_code_version: Optional[str] = None
    model: Optional[str] = None
    cwd: Optional[str] = None
    permission_mode: Optional[str] = Field(default=None, alias="permissionMode")
    api_key_source: Optional[str] = Field(default=None, alias="apiKeySource")
    tools: list[str] = Field(default_factory=list)
    mcp_servers: list[McpServerStatus] = Field(default_factory=list)
    slash_commands: list[str] = Field(default_factory=list)
    agents: Optional[list[str]] = None
    skills: Optional[list[str]] = None
    output_style: Optional[str] = None


class CompactMetadata(_Record):
    """Why and when the conversation was compacted."""
    trigger: str = "auto"
    pre_tokens: Optional[int] = 0


class CompactBoundaryMessage(SystemMessage):
    """Marks the point where the conversation history was compacted."""
    compact_metadata: CompactMetadata = Field(default_factory=CompactMetadata)


class HookResponseMessage(SystemMessage):
    """
    Output of a lifecycle hook command.

    Event-specific fields (tool_name, prompt, source, ...) arrive as extra
    keys and are parsed by the hook formatter.
    """
    hook_name: Optional[str] = None
    hook_event: Optional[str] = None
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    exit_code: Optional[int] = None


class StreamEventMessage(SDKRecord):
    """An incremental streaming delta (partial messages)."""
    event: dict[str, Any]
    parent_tool_use_id: Optional[str] = None


class UnknownMessage(SDKRecord):
    """A record whose kind is not recognized; rendered as a visible fallback."""
    pass


Message = Union[
    AssistantMessage,
    UserMessage,
    ResultMessage,
    SystemInitMessage,
    CompactBoundaryMessage,
    HookResponseMessage,
    SystemMessage,
    StreamEventMessage,
    UnknownMessage,
]


# =============================================================================
# Hook Payloads
# =============================================================================

class HookInput(_Record):
    """Fields shared by every hook event payload."""
    session_id: Optional[str] = None
    cwd: Optional[str] = None
    transcript_path: Optional[str] = None
    permission_mode: Optional[str] = None


class PreToolUseHookInput(HookInput):
    tool_name: str
    tool_input: Any = None


class PostToolUseHookInput(HookInput):
    tool_name: str
    tool_input: Any = None
    tool_response: Any = None


class NotificationHookInput(HookInput):
    title: Optional[str] = None
    message: Optional[str] = None


class UserPromptSubmitHookInput(HookInput):
    prompt: Optional[str] = None


class SessionStartHookInput(HookInput):
    source: Optional[str] = None


class SessionEndHookInput(HookInput):
    reason: Optional[str] = None


class StopHookInput(HookInput):
    stop_hook_active: bool = False


class SubagentStopHookInput(StopHookInput):
    pass


class PreCompactHookInput(HookInput):
    trigger: Optional[str] = None
    custom_instructions: Optional[str] = None


# =============================================================================
# Render Configuration
# =============================================================================

class RenderConfig(BaseModel):
    """
    Immutable render configuration.

    Built once at start-up (config file + CLI flags) and passed to every
    formatter. Unknown theme or layout names are accepted here and resolve
    to the defaults at lookup time.
    """
    model_config = ConfigDict(frozen=True)

    theme: str = Field(
        default=ThemeName.DEFAULT.value,
        description="Color theme name"
    )
    layout: str = Field(
        default=LayoutName.FULL.value,
        description="Layout mode name"
    )
    suppress_stats: bool = Field(
        default=False,
        description="Hide the statistics block of result messages"
    )
    filter_types: Optional[frozenset[str]] = Field(
        default=None,
        description="Message kinds to keep (None keeps all)"
    )
    use_colors: bool = Field(
        default=True,
        description="Emit ANSI escape codes"
    )
    width: Optional[int] = Field(
        default=None,
        description="Box width override (None detects the terminal width)"
    )
