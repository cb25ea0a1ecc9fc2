"""
Allow running the core package as a module.

Usage:
    python -m claude_pretty.core messages.jsonl

Or via the wrapper script:
    python pretty_cli.py messages.jsonl
"""
import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
