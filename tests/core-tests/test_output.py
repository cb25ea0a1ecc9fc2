"""
Tests for text utilities and box framing.
"""
import os

import pytest

from claude_pretty.core import output
from claude_pretty.core.output import (
    create_box,
    first_line,
    format_cost,
    format_number,
    format_param_value,
    format_seconds,
    get_terminal_width,
    indent_lines,
    truncate_text,
)
from claude_pretty.core.themes import Palette


class TestTruncateText:
    """Tests for truncate_text."""

    @pytest.mark.unit
    def test_fits_unchanged(self) -> None:
        """Text at or under the limit is returned as is."""
        assert truncate_text("abc", 3) == "abc"
        assert truncate_text("abc", 10) == "abc"

    @pytest.mark.unit
    def test_truncates_with_ellipsis(self) -> None:
        """Long text keeps max_len-3 characters plus '...'."""
        result = truncate_text("hello world", 8)
        assert result == "hello..."
        assert len(result) == 8

    @pytest.mark.unit
    @pytest.mark.parametrize("max_len", [0, -5])
    def test_non_positive_limit_disables(self, max_len: int) -> None:
        """A limit of zero or less means no truncation."""
        assert truncate_text("x" * 500, max_len) == "x" * 500


class TestFirstLine:
    """Tests for first_line."""

    @pytest.mark.unit
    def test_takes_first_line_stripped(self) -> None:
        assert first_line("  first  \nsecond") == "first"

    @pytest.mark.unit
    def test_truncates(self) -> None:
        assert first_line("x" * 100, 10) == "xxxxxxx..."

    @pytest.mark.unit
    def test_empty(self) -> None:
        assert first_line("") == ""

    @pytest.mark.unit
    def test_default_limit_is_80(self) -> None:
        assert len(first_line("y" * 200)) == 80


class TestFormatHelpers:
    """Tests for number, cost, duration and indentation helpers."""

    @pytest.mark.unit
    def test_format_number(self) -> None:
        assert format_number(12345) == "12,345"
        assert format_number(0) == "0"
        assert format_number(None) == "0"

    @pytest.mark.unit
    def test_format_cost(self) -> None:
        assert format_cost(0.0042) == "$0.0042"
        assert format_cost(None) == "$0.0000"

    @pytest.mark.unit
    def test_format_seconds(self) -> None:
        assert format_seconds(1500) == "1.50s"
        assert format_seconds(None) == "0.00s"

    @pytest.mark.unit
    def test_indent_lines(self) -> None:
        assert indent_lines("a\nb") == "  a\n  b"


class TestFormatParamValue:
    """Tests for format_param_value."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (1.5, "1.5"),
        (1.0, "1"),
        (-3.0, "-3"),
        ("short", '"short"'),
        ([], "[]"),
        ({}, "{}"),
    ])
    def test_scalars_and_empties(self, value: object, expected: str) -> None:
        assert format_param_value(value) == expected

    @pytest.mark.unit
    def test_long_string_truncated(self) -> None:
        """Strings over 100 characters keep 97 plus '...' inside the quotes."""
        result = format_param_value("a" * 101)
        assert result == '"' + "a" * 97 + '..."'

    @pytest.mark.unit
    def test_string_at_limit_kept(self) -> None:
        assert format_param_value("a" * 100) == '"' + "a" * 100 + '"'

    @pytest.mark.unit
    def test_short_list_inline(self) -> None:
        assert format_param_value([1, "two", None]) == '[1, "two", null]'

    @pytest.mark.unit
    def test_long_list_preview(self) -> None:
        assert format_param_value([1, 2, 3, 4, 5]) == "[1, 2, 3, ... +2 more]"

    @pytest.mark.unit
    def test_single_key_dict(self) -> None:
        assert format_param_value({"k": "v"}) == '{ k: "v" }'

    @pytest.mark.unit
    def test_small_dict_compact_json(self) -> None:
        assert format_param_value({"a": 1, "b": 2}) == '{"a":1,"b":2}'

    @pytest.mark.unit
    def test_large_dict_summarized(self) -> None:
        value = {"first": "x" * 60, "second": "y" * 60}
        assert format_param_value(value) == "{ 2 properties }"

    @pytest.mark.unit
    def test_unserializable_dict_summarized(self) -> None:
        """Values JSON cannot encode fall back to the property count."""
        circular: dict = {"a": 1}
        circular["self"] = circular
        assert format_param_value(circular) == "{ 2 properties }"

    @pytest.mark.unit
    def test_nested_values(self) -> None:
        result = format_param_value([{"k": [1, 2, 3, 4]}])
        assert result == "[{ k: [1, 2, 3, ... +1 more] }]"

    @pytest.mark.unit
    def test_other_objects_use_str(self) -> None:
        class Thing:
            def __str__(self) -> str:
                return "thing"

        assert format_param_value(Thing()) == "thing"


class TestTerminalWidth:
    """Tests for get_terminal_width."""

    @pytest.mark.unit
    def test_detected_width(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            output.shutil, "get_terminal_size",
            lambda fallback=(80, 24): os.terminal_size((120, 40)),
        )
        assert get_terminal_width() == 120

    @pytest.mark.unit
    def test_zero_width_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            output.shutil, "get_terminal_size",
            lambda fallback=(80, 24): os.terminal_size((0, 0)),
        )
        assert get_terminal_width() == 80


class TestCreateBox:
    """Tests for create_box."""

    @pytest.fixture
    def plain(self) -> Palette:
        return Palette(enabled=False)

    @pytest.mark.unit
    def test_boxed(self, plain: Palette) -> None:
        box = create_box("HEAD", "body", show_box=True, palette=plain, width=10)
        assert box == "─" * 10 + "\nHEAD\nbody\n" + "─" * 10

    @pytest.mark.unit
    def test_unboxed_with_body(self, plain: Palette) -> None:
        assert create_box("HEAD", "body", show_box=False, palette=plain) == "HEAD\nbody"

    @pytest.mark.unit
    def test_unboxed_blank_body(self, plain: Palette) -> None:
        assert create_box("HEAD", "  \n", show_box=False, palette=plain) == "HEAD"

    @pytest.mark.unit
    def test_rule_is_muted(self) -> None:
        box = create_box("H", "b", show_box=True, palette=Palette(), width=3)
        assert box.startswith("\033[2m───\033[0m\n")
