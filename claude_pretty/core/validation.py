"""
Record validation.

Checks that a parsed JSON value is a usable record and converts it into the
typed model for its kind. Unknown kinds are accepted as UnknownMessage so
that they render visibly instead of being dropped.
"""
import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from .exceptions import MessageValidationError
from .schemas import (
    AssistantMessage,
    CompactBoundaryMessage,
    HookResponseMessage,
    Message,
    MessageKind,
    ResultMessage,
    StreamEventMessage,
    SystemInitMessage,
    SystemMessage,
    SystemSubtype,
    UnknownMessage,
    UserMessage,
)

logger = logging.getLogger(__name__)


_SYSTEM_MODELS: dict[str, type[SystemMessage]] = {
    SystemSubtype.INIT: SystemInitMessage,
    SystemSubtype.COMPACT_BOUNDARY: CompactBoundaryMessage,
    SystemSubtype.HOOK_RESPONSE: HookResponseMessage,
}


def _require_object(record: dict[str, Any], field: str) -> dict[str, Any]:
    value = record.get(field)
    if value is None:
        raise MessageValidationError(field)
    if not isinstance(value, dict):
        raise MessageValidationError(field, "expected an object", missing=False)
    return value


def _require_string(record: dict[str, Any], field: str) -> str:
    value = record.get(field)
    if value is None:
        raise MessageValidationError(field)
    if not isinstance(value, str) or not value:
        raise MessageValidationError(field, "expected a non-empty string", missing=False)
    return value


def _field_path(loc: tuple[Any, ...], record: Any, missing: bool) -> str:
    """
    Turn a pydantic error location into a dotted path of keys from the record.

    Union members add their tag (``str``, ``list[...]``) to the location;
    segments that are not keys or indexes of the input are dropped.
    """
    parts: list[str] = []
    current = record
    for i, part in enumerate(loc):
        if isinstance(part, int) and isinstance(current, list) and 0 <= part < len(current):
            current = current[part]
        elif isinstance(current, dict) and part in current:
            current = current[part]
        elif missing and i == len(loc) - 1:
            current = None
        else:
            continue
        parts.append(str(part))
    return ".".join(parts) or "record"


def _parse(model: type[BaseModel], record: dict[str, Any]) -> Any:
    """Validate with pydantic, reporting the first failing field by its dotted path."""
    try:
        return model.model_validate(record)
    except ValidationError as e:
        first = e.errors()[0]
        missing = first["type"] == "missing"
        field = _field_path(tuple(first["loc"]), record, missing)
        raise MessageValidationError(field, "" if missing else first["msg"], missing=missing) from e


def validate_message(record: Any) -> Message:
    """
    Validate a parsed record and return its typed model.

    Args:
        record: Any JSON value (normally a dict parsed from one NDJSON line).

    Returns:
        The model matching the record's kind (and system subtype).

    Raises:
        MessageValidationError: If the discriminant or a field required by
            the kind is missing or has the wrong shape.
    """
    if not isinstance(record, dict):
        raise MessageValidationError("type", "record is not an object", missing=False)

    kind = _require_string(record, "type")

    if kind == MessageKind.ASSISTANT:
        message = _require_object(record, "message")
        content = message.get("content")
        if content is None:
            raise MessageValidationError("message.content")
        if not isinstance(content, list):
            raise MessageValidationError("message.content", "expected a list of blocks", missing=False)
        return _parse(AssistantMessage, record)

    if kind == MessageKind.USER:
        message = _require_object(record, "message")
        if "content" not in message:
            raise MessageValidationError("message.content")
        return _parse(UserMessage, record)

    if kind == MessageKind.RESULT:
        _require_string(record, "subtype")
        return _parse(ResultMessage, record)

    if kind == MessageKind.SYSTEM:
        subtype = _require_string(record, "subtype")
        model = _SYSTEM_MODELS.get(subtype, SystemMessage)
        return _parse(model, record)

    if kind == MessageKind.STREAM_EVENT:
        _require_object(record, "event")
        return _parse(StreamEventMessage, record)

    logger.debug(f"Unrecognized message type: {kind}")
    return _parse(UnknownMessage, record)
