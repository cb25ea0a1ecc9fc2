#!/usr/bin/env python3
"""
claude-pretty - Entry Point

Transforms raw Claude Agent SDK messages into readable terminal output.

Usage:
    # Pipe from the Claude CLI
    claude -p --output-format stream-json "task" | claude-pretty

    # Filter specific message types
    ... | claude-pretty -f result,assistant

    # Hide stats, pick a theme and layout
    ... | claude-pretty --no-stats --theme nord --layout compact

    # Read from a file (JSON document or NDJSON)
    claude-pretty messages.jsonl

    # Inline JSON
    claude-pretty '{"type":"result","subtype":"success","result":"Done"}'
"""
import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

from ..config import (
    ConfigNotFoundError,
    ConfigValidationError,
    RenderConfigLoader,
)
from .cli_common import (
    add_config_arguments,
    add_display_arguments,
    add_info_arguments,
    add_input_arguments,
    add_logging_arguments,
    add_output_arguments,
    create_common_parser,
)
from .exceptions import InputError, MessageValidationError
from .layouts import LAYOUTS
from .logging_config import setup_cli_logging
from .printer import MessagePrinter, get_raw_text
from .themes import THEMES, ColorSlot, Palette

logger = logging.getLogger(__name__)


EPILOG = """
Examples:
  claude -p --output-format stream-json "test" | claude-pretty
  claude -p --output-format stream-json "test" | claude-pretty -f result
  claude-pretty --layout minimal messages.jsonl
  claude-pretty '{"type":"result","subtype":"success","result":"Done"}'

Message types: assistant, user, result, system, stream_event
"""


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = create_common_parser(
        description="Transform raw Claude Agent SDK messages into readable CLI output",
        epilog=EPILOG,
    )
    add_input_arguments(parser)
    add_display_arguments(parser)
    add_output_arguments(parser)
    add_config_arguments(parser)
    add_logging_arguments(parser)
    add_info_arguments(parser)
    return parser.parse_args(argv)


def detect_colors() -> bool:
    """Colors on for terminals, unless NO_COLOR is set; FORCE_COLOR wins."""
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


# =============================================================================
# Informational Commands
# =============================================================================

def show_themes(use_colors: bool) -> None:
    """Print available themes with a swatch of their slots."""
    print("\nAvailable themes:\n")
    for name, theme in THEMES.items():
        palette = Palette(name, enabled=use_colors)
        swatch = " ".join(palette.slot(slot, slot.value) for slot in ColorSlot)
        print(f"  {name:<10} {theme.description}")
        print(f"  {'':<10} {swatch}")
    print()


def show_layouts() -> None:
    """Print available layouts and their switches."""
    print("\nAvailable layouts:\n")
    for name, layout in LAYOUTS.items():
        flags = [
            f"box={'on' if layout.show_box else 'off'}",
            f"tool-params={'on' if layout.show_tool_params else 'off'}",
            f"stats={'on' if layout.show_stats else 'off'}",
        ]
        if layout.max_content_length:
            flags.append(f"max={layout.max_content_length}")
        print(f"  {name:<10} {layout.description}")
        print(f"  {'':<10} {', '.join(flags)}")
    print()


# =============================================================================
# Record Processing
# =============================================================================

class RecordRenderer:
    """
    Renders parsed records to an output stream.

    Per-record problems (bad JSON, invalid messages) are reported on the
    error stream and never stop the run.

    Args:
        printer: Configured MessagePrinter.
        raw: Print raw text instead of formatted output.
        show_box: Frame messages when the layout allows.
        out: Output stream (defaults to sys.stdout at call time).
        err: Error stream (defaults to sys.stderr at call time).
    """

    def __init__(
        self,
        printer: MessagePrinter,
        raw: bool = False,
        show_box: bool = True,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.printer = printer
        self.raw = raw
        self.show_box = show_box
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def render_record(self, record: Any) -> None:
        """Format one parsed record and print it unless blank."""
        if not self.printer.should_show(record):
            return
        try:
            if self.raw:
                text = get_raw_text(record)
            else:
                text = self.printer.format(record, show_box=self.show_box)
        except MessageValidationError as e:
            logger.warning(f"Skipping invalid message: {e}")
            print(f"Invalid message: {e}", file=self.err)
            return
        if text.strip():
            print(text, file=self.out)

    def render_line(self, line: str) -> None:
        """Parse one NDJSON line and render it."""
        if not line.strip():
            return
        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            logger.debug(f"Unparseable line: {line!r}")
            print(f"Error parsing JSON: {e}", file=self.err)
            print(f"Invalid line: {line.rstrip()}", file=self.err)
            return
        self.render_record(record)

    def process_stream(self, stream: TextIO) -> None:
        """Render NDJSON records from a stream as they arrive."""
        for line in stream:
            self.render_line(line)
            self.out.flush()

    def process_file(self, path: Path) -> None:
        """
        Render a file: one JSON document (object or array), else NDJSON.

        Raises:
            InputError: If the file does not exist or cannot be read.
        """
        if not path.is_file():
            raise InputError(f"File not found: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Error reading file: {e}") from e

        try:
            document = json.loads(content)
        except json.JSONDecodeError:
            for line in content.splitlines():
                self.render_line(line)
            return

        records = document if isinstance(document, list) else [document]
        for record in records:
            self.render_record(record)

    def process_inline(self, text: str) -> None:
        """
        Render a single inline JSON record.

        Raises:
            InputError: If the argument is not valid JSON.
        """
        try:
            record = json.loads(text)
        except json.JSONDecodeError as e:
            raise InputError(f"Error parsing JSON: {e}") from e
        self.render_record(record)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code.
    """
    args = parse_args(argv)

    setup_cli_logging(
        log_level=args.log_level,
        log_file=Path(args.log_file) if args.log_file else None,
    )

    if args.list_themes:
        show_themes(args.colors if args.colors is not None else detect_colors())
        return 0

    if args.list_layouts:
        show_layouts()
        return 0

    if len(args.sources) > 1:
        print(
            "Error: Too many arguments. Use --help for usage information.",
            file=sys.stderr,
        )
        return 1

    try:
        loader = RenderConfigLoader(Path(args.config) if args.config else None)
        loader.apply_cli_overrides(
            theme=args.theme,
            layout=args.layout,
            stats=args.stats,
            colors=args.colors,
            filter=args.filter,
            width=args.width,
        )
        config = loader.get_render_config(use_colors=detect_colors())
    except (ConfigNotFoundError, ConfigValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Render config: {config}")
    renderer = RecordRenderer(
        MessagePrinter(config),
        raw=args.raw,
        show_box=not args.no_box,
    )

    try:
        print()
        if not args.sources:
            renderer.process_stream(sys.stdin)
        elif args.sources[0].lstrip().startswith("{"):
            renderer.process_inline(args.sources[0])
        else:
            renderer.process_file(Path(args.sources[0]))
    except InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
