#!/usr/bin/env python3
"""
Reformat a saved stack trace into devlog's readable frame lines.

Usage:
    python scripts/reformat_trace.py trace.txt [--mode sweep|frame] [--script-root PATH]
    some_command 2>&1 | python scripts/reformat_trace.py -
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path to import devlog
sys.path.insert(0, str(Path(__file__).parent.parent))

from devlog.config import load_config
from devlog.trace import TRACE_MODES, parse_trace


def read_trace(source: str) -> str:
    """Read trace text from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Trace file not found: {path}")
    return path.read_text(encoding="utf-8")


def main(argv=None):
    """Parse arguments, reformat the trace and print it."""
    parser = argparse.ArgumentParser(description="Reformat a raw stack trace")
    parser.add_argument("source", help="Trace file, or - for stdin")
    parser.add_argument("--mode", choices=TRACE_MODES, help="Override DEVLOG_TRACE_MODE")
    parser.add_argument("--script-root", help="Override DEVLOG_SCRIPT_ROOT (frame mode)")
    args = parser.parse_args(argv)

    config = load_config()
    mode = args.mode or config.trace_mode
    script_root = args.script_root or config.script_root

    try:
        trace = read_trace(args.source)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(parse_trace(trace.rstrip("\n"), mode, script_root))
    return 0


if __name__ == "__main__":
    sys.exit(main())
