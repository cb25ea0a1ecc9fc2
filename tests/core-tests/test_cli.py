"""
Tests for the claude-pretty command line.

Unit tests call main(argv) in-process; the integration test runs the
wrapper script in a subprocess against the sample transcript in input/.
"""
import io
import json
import logging
import os
import subprocess
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

import pytest

from claude_pretty import config as config_module
from claude_pretty.core.cli import RecordRenderer, detect_colors, main
from claude_pretty.core.exceptions import InputError
from claude_pretty.core.printer import MessagePrinter
from claude_pretty.core.schemas import RenderConfig

PROJECT_ROOT: Path = Path(__file__).parent.parent.parent
PRETTY_CLI: Path = PROJECT_ROOT / "pretty_cli.py"

RESULT_JSON = json.dumps({
    "type": "result",
    "subtype": "success",
    "result": "Done",
    "duration_ms": 1500,
    "total_cost_usd": 0.0042,
})


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the user's config, color env vars and root log handlers out of tests."""
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "absent.yaml")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def _write_jsonl(path: Path, records: list[Any]) -> Path:
    path.write_text("\n".join(json.dumps(r) for r in records) + "\n", encoding="utf-8")
    return path


class TestMain:
    """Tests for main()."""

    @pytest.mark.unit
    def test_inline_result(self, capsys: pytest.CaptureFixture[str]) -> None:
        rc = main(["--no-color", "--width", "20", RESULT_JSON])
        out = capsys.readouterr().out
        assert rc == 0
        assert out.startswith("\n")
        assert "─" * 20 in out
        assert "✓ Task completed successfully" in out
        assert "$0.0042" in out
        assert "1.50s" in out

    @pytest.mark.unit
    def test_no_stats(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--no-color", "--no-stats", RESULT_JSON]) == 0
        assert "Statistics:" not in capsys.readouterr().out

    @pytest.mark.unit
    def test_minimal_layout(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--no-color", "--layout", "minimal", RESULT_JSON]) == 0
        assert capsys.readouterr().out == "\n◆ RESULT ✓ success $0.0042\n"

    @pytest.mark.unit
    def test_no_box(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--no-color", "--no-box", RESULT_JSON]) == 0
        out = capsys.readouterr().out
        assert "─" not in out
        assert "◆ RESULT" not in out
        assert "✓ Task completed successfully" in out

    @pytest.mark.unit
    def test_raw(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--raw", RESULT_JSON]) == 0
        assert capsys.readouterr().out == "\nDone\n"

    @pytest.mark.unit
    def test_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(RESULT_JSON + "\n\n"))
        assert main(["--no-color", "--layout", "header"]) == 0
        assert capsys.readouterr().out == "\n◆ RESULT\n"

    @pytest.mark.unit
    def test_ndjson_file_with_bad_line(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "messages.jsonl"
        path.write_text(
            RESULT_JSON + "\n"
            "{not json\n"
            '{"type": "assistant", "message": {"content": [{"type": "text", "text": "Hi"}]}}\n',
            encoding="utf-8",
        )
        assert main(["--no-color", "--layout", "minimal", str(path)]) == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "",
            "◆ RESULT ✓ success $0.0042",
            "◆ ASSISTANT Hi",
        ]
        assert "Error parsing JSON:" in captured.err
        assert "Invalid line: {not json" in captured.err

    @pytest.mark.unit
    def test_json_array_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "messages.json"
        path.write_text(json.dumps([
            json.loads(RESULT_JSON),
            {"type": "system", "subtype": "init", "model": "m", "tools": []},
        ]), encoding="utf-8")
        assert main(["--no-color", "--layout", "header", str(path)]) == 0
        assert capsys.readouterr().out == "\n◆ RESULT\n◆ SYSTEM\n"

    @pytest.mark.unit
    def test_filter(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write_jsonl(tmp_path / "messages.jsonl", [
            json.loads(RESULT_JSON),
            {"type": "assistant", "message": {"content": [{"type": "text", "text": "Hi"}]}},
        ])
        assert main(["--no-color", "--layout", "header", "-f", "assistant", str(path)]) == 0
        assert capsys.readouterr().out == "\n◆ ASSISTANT\n"

    @pytest.mark.unit
    def test_invalid_message_reported(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write_jsonl(tmp_path / "messages.jsonl", [
            {"type": "result"},
            json.loads(RESULT_JSON),
        ])
        assert main(["--no-color", "--layout", "header", str(path)]) == 0
        captured = capsys.readouterr()
        assert "Invalid message: Message is missing required field 'subtype'" in captured.err
        assert captured.out == "\n◆ RESULT\n"

    @pytest.mark.unit
    def test_too_many_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["a.jsonl", "b.jsonl"]) == 1
        assert "Too many arguments" in capsys.readouterr().err

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "nope.jsonl")]) == 1
        assert "File not found" in capsys.readouterr().err

    @pytest.mark.unit
    def test_bad_inline_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["{broken"]) == 1
        assert "Error parsing JSON" in capsys.readouterr().err

    @pytest.mark.unit
    def test_missing_config_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["-c", str(tmp_path / "nope.yaml"), RESULT_JSON]) == 1
        assert "Configuration file not found" in capsys.readouterr().err

    @pytest.mark.unit
    def test_config_file_applied(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config_path = tmp_path / "config.yaml"
        config_path.write_text("display:\n  layout: minimal\n  colors: false\n", encoding="utf-8")
        assert main(["-c", str(config_path), RESULT_JSON]) == 0
        assert capsys.readouterr().out == "\n◆ RESULT ✓ success $0.0042\n"

    @pytest.mark.unit
    def test_list_themes(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--list-themes", "--no-color"]) == 0
        out = capsys.readouterr().out
        for name in ("default", "monokai", "dracula", "nord"):
            assert name in out

    @pytest.mark.unit
    def test_list_layouts(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--list-layouts"]) == 0
        out = capsys.readouterr().out
        assert "minimal" in out
        assert "max=80" in out

    @pytest.mark.unit
    def test_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "pretty.log"
        assert main(["--log-level", "DEBUG", "--log-file", str(log_file), RESULT_JSON]) == 0
        for handler in logging.getLogger().handlers:
            if isinstance(handler, RotatingFileHandler):
                handler.close()
        assert log_file.exists()
        assert "Render config" in log_file.read_text(encoding="utf-8")


class TestColorDetection:
    """Tests for detect_colors."""

    @pytest.mark.unit
    def test_force_color_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        monkeypatch.setenv("NO_COLOR", "1")
        assert detect_colors() is True

    @pytest.mark.unit
    def test_no_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        assert detect_colors() is False

    @pytest.mark.unit
    def test_not_a_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdout", io.StringIO())
        assert detect_colors() is False


class TestRecordRenderer:
    """Tests for RecordRenderer with explicit streams."""

    @pytest.fixture
    def streams(self) -> tuple[io.StringIO, io.StringIO]:
        return io.StringIO(), io.StringIO()

    @pytest.fixture
    def renderer(self, streams: tuple[io.StringIO, io.StringIO]) -> RecordRenderer:
        out, err = streams
        config = RenderConfig(use_colors=False, layout="header")
        return RecordRenderer(MessagePrinter(config), out=out, err=err)

    @pytest.mark.unit
    def test_stream_skips_blank_lines(
        self, renderer: RecordRenderer, streams: tuple[io.StringIO, io.StringIO]
    ) -> None:
        renderer.process_stream(io.StringIO("\n  \n" + RESULT_JSON + "\n"))
        assert streams[0].getvalue() == "◆ RESULT\n"
        assert streams[1].getvalue() == ""

    @pytest.mark.unit
    def test_blank_output_not_printed(
        self, renderer: RecordRenderer, streams: tuple[io.StringIO, io.StringIO]
    ) -> None:
        renderer.render_record({"type": "user", "isReplay": True, "message": {"content": "x"}})
        assert streams[0].getvalue() == ""

    @pytest.mark.unit
    def test_missing_file(self, renderer: RecordRenderer, tmp_path: Path) -> None:
        with pytest.raises(InputError, match="File not found"):
            renderer.process_file(tmp_path / "absent.jsonl")

    @pytest.mark.unit
    def test_inline_invalid_json(self, renderer: RecordRenderer) -> None:
        with pytest.raises(InputError):
            renderer.process_inline("{nope")


class TestCliIntegration:
    """Runs the wrapper script end to end."""

    @pytest.mark.integration
    def test_renders_session_transcript(self, session_file: Path, tmp_path: Path) -> None:
        env = os.environ.copy()
        env.pop("FORCE_COLOR", None)
        env["CLAUDE_PRETTY_HOME"] = str(tmp_path)

        result = subprocess.run(
            [sys.executable, str(PRETTY_CLI), "--no-color", "--width", "30", str(session_file)],
            cwd=str(PROJECT_ROOT),
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )

        assert result.returncode == 0, f"STDERR: {result.stderr}"
        out = result.stdout
        assert "Claude Code Session Initialized" in out
        assert "→ Bash" in out
        assert '  command: "ls"' in out
        assert "◆ USER (Tool Results)" in out
        assert "✓ Task completed successfully" in out
        assert "\033[" not in out
        assert result.stderr == ""
