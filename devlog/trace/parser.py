"""
Stack-trace parsing.

Reformats host stack-trace lines of the shape ``<path>:<line><rest>`` into
``→ <path> (line <n>): function '<name>'``. Lines of any other shape pass
through untouched, so parsing never fails on unexpected input.
"""

import re
from dataclasses import dataclass
from typing import Optional

SWEEP = "sweep"
FRAME = "frame"

TRACE_MODES = (SWEEP, FRAME)

FRAME_PATTERN = re.compile(r"^(\s*)(.+?):(\d+)(.*)$")
FUNCTION_PATTERN = re.compile(r"function\s+'?([\w.<>]+)'?")


@dataclass(frozen=True)
class TraceFrame:
    """One parsed stack frame."""

    source_path: str
    line_number: int
    function_name: Optional[str] = None

    def format(self) -> str:
        text = f"→ {self.source_path} (line {self.line_number})"
        if self.function_name:
            text += f": function '{self.function_name}'"
        return text


def parse_frame(line: str) -> Optional[TraceFrame]:
    """
    Parse a single trace line.

    Args:
        line: One line of raw trace text

    Returns:
        TraceFrame, or None when the line has no path:line shape
    """
    match = FRAME_PATTERN.match(line)
    if not match:
        return None

    _, path, line_number, rest = match.groups()
    function = FUNCTION_PATTERN.search(rest)
    return TraceFrame(
        source_path=path,
        line_number=int(line_number),
        function_name=function.group(1) if function else None
    )


def format_frame_line(line: str) -> Optional[str]:
    """Reformat a trace line, keeping its leading whitespace. None if no match."""
    frame = parse_frame(line)
    if frame is None:
        return None
    indent = FRAME_PATTERN.match(line).group(1)
    return indent + frame.format()


def parse_sweep(trace: str) -> str:
    """
    Reformat every path:line line of a trace.

    Args:
        trace: Raw trace text

    Returns:
        Reformatted trace, or the original text if no line matched
    """
    matched = False
    lines = []
    for line in trace.split("\n"):
        formatted = format_frame_line(line)
        if formatted is None:
            lines.append(line)
        else:
            matched = True
            lines.append(formatted)

    if not matched:
        return trace

    result = "\n".join(lines)
    if result.startswith("\n"):
        result = result[1:]
    return result


def parse_single_frame(trace: str, script_root: str) -> str:
    """
    Reformat only the first frame that lives under the script root.

    Args:
        trace: Raw trace text
        script_root: Marker the application's own frames start with

    Returns:
        The single reformatted frame, or the original text if none found
    """
    if not script_root:
        return trace

    for line in trace.split("\n"):
        content = line.strip()
        if not content.startswith(script_root):
            continue
        formatted = format_frame_line(content)
        if formatted is not None:
            return formatted
    return trace


def parse_trace(trace: str, mode: str = SWEEP, script_root: str = "") -> str:
    """Dispatch to the sweep or single-frame parser."""
    if mode == FRAME:
        return parse_single_frame(trace, script_root)
    return parse_sweep(trace)


def strip_seed(trace: str, body: str, extra_skip: int = 0) -> str:
    """
    Drop the header lines a trace source added for the seed message.

    The seed is only stripped when the trace actually starts with it; the
    extra skip count is always applied.

    Args:
        trace: Raw trace as returned by the trace source
        body: Seed message passed to the trace source
        extra_skip: Additional host-specific header lines to drop

    Returns:
        Trace text without the seed header
    """
    skip = max(0, extra_skip)
    if trace.startswith(body):
        skip += len(body.split("\n"))
    if not skip:
        return trace
    return "\n".join(trace.split("\n")[skip:])
