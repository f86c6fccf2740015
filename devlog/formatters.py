"""
Message formatters.

Builds the decorated text block handed to a sink:

    ╞ ──────── PRINT ──────── ╡

    • "hello"
    • 42

    stack traceback:
    	→ /app/main.py (line 12): function 'main'

    ╞ ─────────────────────── ╡
"""

from typing import Optional, Sequence

from .config import FormatterConfig
from .trace.parser import parse_trace, strip_seed
from .trace.source import StackTraceSource, TraceSource

DECORATION_WIDTH = 25
DASH = "─"
LEFT_MARKER = "╞"
RIGHT_MARKER = "╡"

BULLET = "• "
PART_SEPARATOR = "\n" + BULLET


def format_decoration(label: str) -> str:
    """
    Format a banner line with the label centred.

    The dashes and the spaces around the label fill DECORATION_WIDTH
    characters; the right side takes the extra dash on odd splits. Labels
    too long to centre get no dashes.

    Args:
        label: Banner text (e.g., "PRINT")

    Returns:
        Banner string
    """
    padding = DECORATION_WIDTH - len(label) - 2
    left = max(0, padding // 2)
    right = max(0, padding - padding // 2)
    return f"{LEFT_MARKER} {DASH * left} {label} {DASH * right} {RIGHT_MARKER}"


def format_plain_decoration() -> str:
    """Format the closing banner line (no label)."""
    return f"{LEFT_MARKER} {DASH * DECORATION_WIDTH} {RIGHT_MARKER}"


def join_parts(parts: Sequence[str]) -> str:
    return PART_SEPARATOR.join(parts)


class MessageFormatter:
    """
    Composes banner, body and parsed trace into one message.

    Usage:
        formatter = MessageFormatter()
        text = formatter.format("PRINT", ['"hello"', "42"])
    """

    def __init__(
        self,
        trace_source: Optional[TraceSource] = None,
        config: Optional[FormatterConfig] = None
    ):
        """
        Initialize message formatter.

        Args:
            trace_source: Trace source (defaults to StackTraceSource)
            config: Formatter configuration (defaults to FormatterConfig())
        """
        self.trace_source = trace_source or StackTraceSource()
        self.config = config or FormatterConfig()

    def format_trace(self, body: str) -> str:
        """
        Capture and parse the trace for the current call site.

        Args:
            body: Joined message body, used as the trace seed

        Returns:
            Parsed trace text
        """
        raw = self.trace_source.capture(body)
        raw = strip_seed(raw, body, self.config.extra_skip_lines)
        return parse_trace(raw, self.config.trace_mode, self.config.script_root)

    def format(self, type_label: str, parts: Sequence[str]) -> str:
        """
        Format a complete message.

        Args:
            type_label: Message type (e.g., "PRINT", "ERROR")
            parts: Already rendered message parts

        Returns:
            Formatted message
        """
        body = join_parts(parts)
        trace = self.format_trace(body)
        spacer = "\n" if len(parts) >= 2 else ""

        return (
            f"\n\n{format_decoration(type_label)}\n\n"
            f"{BULLET}{body}\n{spacer}\n"
            f"{trace}\n\n"
            f"{format_plain_decoration()}\n\n"
        )
