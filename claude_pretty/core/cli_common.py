"""
CLI argument parsing utilities for claude-pretty-printer.

Provides argument group builders used by the CLI entry point.

Usage:
    from .cli_common import add_display_arguments, create_common_parser

    parser = create_common_parser("Pretty-print agent messages")
    add_display_arguments(parser)
"""
import argparse

from .constants import DEFAULT_LOG_LEVEL
from .layouts import LAYOUT_NAMES
from .themes import THEME_NAMES


# =============================================================================
# Argument Group Builders
# =============================================================================

def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Add the record source argument to parser.

    Args:
        parser: ArgumentParser to add arguments to.
    """
    parser.add_argument(
        "sources",
        nargs="*",
        metavar="SOURCE",
        help="File of JSON/NDJSON records, or one inline JSON record "
             "(default: read NDJSON from stdin)"
    )


def add_display_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Add display arguments to parser.

    Every option defaults to None so that unset flags do not override
    values from the config file.

    Args:
        parser: ArgumentParser to add arguments to.
    """
    parser.add_argument(
        "--theme",
        type=str,
        choices=THEME_NAMES,
        default=None,
        help="Color theme (default: default)"
    )
    parser.add_argument(
        "--layout",
        type=str,
        choices=LAYOUT_NAMES,
        default=None,
        help="Layout mode (default: full)"
    )
    parser.add_argument(
        "--no-stats",
        dest="stats",
        action="store_const",
        const=False,
        default=None,
        help="Hide the statistics block of result messages"
    )
    parser.add_argument(
        "--filter", "-f",
        type=str,
        default=None,
        metavar="KINDS",
        help="Only show these message types, comma-separated "
             "(e.g. result,assistant)"
    )
    parser.add_argument(
        "--no-color",
        dest="colors",
        action="store_const",
        const=False,
        default=None,
        help="Disable ANSI colors (also honored: NO_COLOR environment variable)"
    )
    parser.add_argument(
        "--color",
        dest="colors",
        action="store_const",
        const=True,
        help="Force ANSI colors even when stdout is not a terminal"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Box width in columns (default: terminal width)"
    )


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Add output mode arguments to parser.

    Args:
        parser: ArgumentParser to add arguments to.
    """
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print only the raw text content of each message"
    )
    parser.add_argument(
        "--no-box",
        action="store_true",
        help="Never frame messages, regardless of layout"
    )


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Add configuration file argument to parser.

    Args:
        parser: ArgumentParser to add arguments to.
    """
    parser.add_argument(
        "--config", "-c",
        type=str,
        metavar="PATH",
        help="Path to config.yaml (default: ~/.claude-pretty/config.yaml if present)"
    )


def add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Add logging configuration arguments to parser.

    Args:
        parser: ArgumentParser to add arguments to.
    """
    parser.add_argument(
        "--log-level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level for diagnostics on stderr (default: {DEFAULT_LOG_LEVEL})"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Also write diagnostics to a rotating log file"
    )


def add_info_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Add informational commands to parser.

    Args:
        parser: ArgumentParser to add arguments to.
    """
    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="Show available themes and exit"
    )
    parser.add_argument(
        "--list-layouts",
        action="store_true",
        help="Show available layouts and exit"
    )


# =============================================================================
# Parser Builders
# =============================================================================

def create_common_parser(
    description: str,
    epilog: str = "",
) -> argparse.ArgumentParser:
    """
    Create a parser with common formatting settings.

    Args:
        description: Parser description.
        epilog: Parser epilog (examples).

    Returns:
        Configured ArgumentParser.
    """
    return argparse.ArgumentParser(
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
