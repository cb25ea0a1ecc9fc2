"""
Pytest configuration for core-tests.

This module contains fixtures and configuration for the renderer tests.
All fixtures render without colors so assertions can match plain text.
"""
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from claude_pretty.core.context import RenderContext
from claude_pretty.core.schemas import RenderConfig


TESTS_DIR: Path = Path(__file__).parent
INPUT_DIR: Path = TESTS_DIR / "input"

TEST_WIDTH = 40


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (run the CLI in a subprocess)"
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests"
    )


@pytest.fixture
def make_config() -> Callable[..., RenderConfig]:
    """Factory for colorless render configs with a fixed box width."""
    def _make(**overrides: Any) -> RenderConfig:
        values: dict[str, Any] = {"use_colors": False, "width": TEST_WIDTH}
        values.update(overrides)
        return RenderConfig(**values)
    return _make


@pytest.fixture
def make_ctx(make_config: Callable[..., RenderConfig]) -> Callable[..., RenderContext]:
    """Factory for render contexts, e.g. make_ctx(layout="minimal")."""
    def _make(**overrides: Any) -> RenderContext:
        return RenderContext.from_config(make_config(**overrides))
    return _make


@pytest.fixture
def session_file() -> Path:
    """NDJSON transcript of a short session."""
    return INPUT_DIR / "session.jsonl"


# =============================================================================
# Sample Records
# =============================================================================

@pytest.fixture
def assistant_record() -> dict[str, Any]:
    return {
        "type": "assistant",
        "session_id": "session-123",
        "message": {
            "content": [
                {"type": "text", "text": "Let me read the file."},
                {
                    "type": "tool_use",
                    "id": "toolu_01",
                    "name": "Read",
                    "input": {"file_path": "/src/app.py", "limit": 10},
                },
            ],
        },
    }


@pytest.fixture
def user_record() -> dict[str, Any]:
    return {
        "type": "user",
        "message": {"role": "user", "content": "Please fix the bug"},
    }


@pytest.fixture
def tool_result_record() -> dict[str, Any]:
    return {
        "type": "user",
        "message": {
            "role": "user",
            "content": [
                {"type": "tool_result", "tool_use_id": "toolu_01", "content": "file contents"},
            ],
        },
    }


@pytest.fixture
def result_record() -> dict[str, Any]:
    return {
        "type": "result",
        "subtype": "success",
        "result": "Done",
        "is_error": False,
        "duration_ms": 1500,
        "duration_api_ms": 1200,
        "num_turns": 3,
        "total_cost_usd": 0.0042,
        "usage": {"input_tokens": 12345, "output_tokens": 678},
    }


@pytest.fixture
def init_record() -> dict[str, Any]:
    return {
        "type": "system",
        "subtype": "init",
        "session_id": "session-123",
        "claude_code_version": "1.0.0",
        "model": "claude-3-sonnet",
        "cwd": "/workspace",
        "permissionMode": "default",
        "apiKeySource": "user",
        "tools": ["Read", "Write", "Bash"],
        "mcp_servers": [
            {"name": "filesystem", "status": "connected"},
            {"name": "database", "status": "failed"},
        ],
        "slash_commands": ["help", "clear"],
    }


@pytest.fixture
def hook_response_record() -> dict[str, Any]:
    return {
        "type": "system",
        "subtype": "hook_response",
        "hook_name": "lint-check",
        "hook_event": "UnknownEvent",
        "stdout": "all clean",
        "stderr": "warning: slow",
        "exit_code": 1,
    }
