"""
Debug console.

Entry points that render their arguments, build a decorated message and
hand it to a sink:

    from devlog import debug_print, debug_assert

    debug_print("loaded", {"items": 3})
    debug_assert(user is not None, "user missing")

error() and a failed assert_() raise TaskHalted after reporting.
"""

from typing import Any, Optional

from .config import FormatterConfig, load_config
from .errors import TaskHalted
from .formatters import MessageFormatter
from .render.values import render_value
from .sinks import ConsoleSink, SinkBackend
from .trace.source import TraceSource

PRINT = "PRINT"
WARNING = "WARNING"
ERROR = "ERROR"
ASSERTION = "ASSERTION"
CHECKPOINT = "CHECKPOINT"

DEFAULT_ASSERT_MESSAGE = "Assertion Failed!"


class DebugConsole:
    """
    Formats debug events and sends them to a sink.

    Usage:
        console = DebugConsole(sink=MemorySink())
        console.print("hello", 42, True)
        console.checkpoint("after load")
    """

    def __init__(
        self,
        sink: Optional[SinkBackend] = None,
        trace_source: Optional[TraceSource] = None,
        config: Optional[FormatterConfig] = None
    ):
        """
        Initialize debug console.

        Args:
            sink: Sink backend (defaults to ConsoleSink)
            trace_source: Trace source (defaults to StackTraceSource)
            config: Formatter configuration (defaults to FormatterConfig())
        """
        self.sink = sink or ConsoleSink()
        self.config = config or FormatterConfig()
        self.style = self.config.render_style()
        self.formatter = MessageFormatter(trace_source=trace_source, config=self.config)

    def _format(self, label: str, values) -> str:
        return self.formatter.format(label, [render_value(v, self.style) for v in values])

    def print(self, *values: Any):
        """Send values to the console sink."""
        self.sink.write_info(self._format(PRINT, values))

    def warn(self, *values: Any):
        """Send values to the warning sink."""
        self.sink.write_warning(False, self._format(WARNING, values))

    def error(self, *values: Any):
        """
        Report values to the error sink and halt.

        Raises:
            TaskHalted: Always, after the sink call
        """
        text = self._format(ERROR, values)
        self.sink.write_error(text)
        raise TaskHalted(ERROR, text)

    def assert_(self, condition: Any, message: Any = None):
        """
        Report and halt if condition is falsy; otherwise do nothing.

        Args:
            condition: Value tested for truthiness
            message: Report text (defaults to "Assertion Failed!"); non-string
                values are rendered like print arguments

        Raises:
            TaskHalted: If condition is falsy
        """
        if condition:
            return

        if message is None:
            message = DEFAULT_ASSERT_MESSAGE
        elif not isinstance(message, str):
            message = render_value(message, self.style)

        text = self.formatter.format(ASSERTION, [message])
        self.sink.write_error(text)
        raise TaskHalted(ASSERTION, text)

    def checkpoint(self, name: Any):
        """Send a named checkpoint to the diagnostic sink."""
        self.sink.write_diagnostic(self._format(CHECKPOINT, [name]))


# Global console instance
_default_console = None


def get_console() -> DebugConsole:
    """Get or create the default console (configured from env / .env)."""
    global _default_console
    if _default_console is None:
        _default_console = DebugConsole(config=load_config())
    return _default_console


def configure(
    sink: Optional[SinkBackend] = None,
    trace_source: Optional[TraceSource] = None,
    config: Optional[FormatterConfig] = None
) -> DebugConsole:
    """
    Replace the default console.

    Args:
        sink: Sink backend (defaults to ConsoleSink)
        trace_source: Trace source (defaults to StackTraceSource)
        config: Formatter configuration (defaults to load_config())

    Returns:
        The new default console
    """
    global _default_console
    _default_console = DebugConsole(
        sink=sink,
        trace_source=trace_source,
        config=config or load_config()
    )
    return _default_console


def debug_print(*values: Any):
    get_console().print(*values)


def debug_warn(*values: Any):
    get_console().warn(*values)


def debug_error(*values: Any):
    get_console().error(*values)


def debug_assert(condition: Any, message: Any = None):
    get_console().assert_(condition, message)


def debug_checkpoint(name: Any):
    get_console().checkpoint(name)
