#!/usr/bin/env python3
"""
CLI Entry point for claude-pretty-printer (direct execution).

Runs the printer from a source checkout without installing the package.
Once installed, the `claude-pretty` console script does the same.
"""
import sys
from pathlib import Path

# Add project root to sys.path so that 'claude_pretty' can be imported as a package
_project_root = Path(__file__).parent
sys.path.insert(0, str(_project_root))

from claude_pretty.core.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
