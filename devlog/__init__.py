"""
Decorated debug output.

Renders print / warn / error / assert / checkpoint events as a boxed
header, the rendered values and a cleaned-up call-stack trace.

Quick Start:
    from devlog import debug_print, debug_checkpoint

    debug_print("hello", 42, True, {"nested": [1, 2]})
    debug_checkpoint("after setup")

Advanced Usage:
    from devlog import DebugConsole, FormatterConfig, MemorySink

    # Tree-style containers, only the first application frame
    config = FormatterConfig(style="tree", trace_mode="frame")
    console = DebugConsole(config=config)

    # In-memory sink for testing
    sink = MemorySink()
    console = DebugConsole(sink=sink)
    console.warn("low disk")
    texts = sink.texts("warning")

Fatal reports:
    debug_error(...) and a failed debug_assert(...) raise TaskHalted
    after the report reaches the sink.
"""

from .config import FormatterConfig, load_config
from .emitter import (
    DebugConsole,
    configure,
    debug_assert,
    debug_checkpoint,
    debug_error,
    debug_print,
    debug_warn,
    get_console,
)
from .errors import ConfigError, TaskHalted
from .formatters import (
    MessageFormatter,
    format_decoration,
    format_plain_decoration,
)
from .render import HasQualifiedName, RenderStyle, render_bracketed, render_tree, render_value
from .sinks import ConsoleSink, MemorySink, SinkBackend
from .trace import (
    StackTraceSource,
    StaticTraceSource,
    TraceFrame,
    TraceSource,
    parse_frame,
    parse_trace,
)

__all__ = [
    # Entry points
    "debug_print",
    "debug_warn",
    "debug_error",
    "debug_assert",
    "debug_checkpoint",
    "DebugConsole",
    "get_console",
    "configure",

    # Configuration and errors
    "FormatterConfig",
    "load_config",
    "ConfigError",
    "TaskHalted",

    # Formatting
    "MessageFormatter",
    "format_decoration",
    "format_plain_decoration",
    "render_value",
    "render_bracketed",
    "render_tree",
    "RenderStyle",
    "HasQualifiedName",

    # Traces
    "TraceSource",
    "StackTraceSource",
    "StaticTraceSource",
    "TraceFrame",
    "parse_frame",
    "parse_trace",

    # Sinks
    "SinkBackend",
    "ConsoleSink",
    "MemorySink",
]

__version__ = "1.0.0"
