"""
Sink backends for formatted messages.

A sink receives fully formatted text and decides where it goes. The
console sink prints; the memory sink records calls for tests.
"""

import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO, Tuple

INFO = "info"
WARNING = "warning"
ERROR = "error"
DIAGNOSTIC = "diagnostic"


class SinkBackend(ABC):
    """Abstract base class for sinks."""

    @abstractmethod
    def write_info(self, text: str):
        """
        Write a regular console message.

        Args:
            text: Formatted message
        """
        pass

    @abstractmethod
    def write_warning(self, condition: bool, text: str):
        """
        Write a warning.

        Args:
            condition: The warning is shown only when this is falsy
            text: Formatted message
        """
        pass

    @abstractmethod
    def write_error(self, text: str):
        """
        Write an error report.

        Args:
            text: Formatted message
        """
        pass

    @abstractmethod
    def write_diagnostic(self, text: str):
        """
        Write a diagnostic message (checkpoints).

        Args:
            text: Formatted message
        """
        pass


class ConsoleSink(SinkBackend):
    """
    Console sink.

    Info and diagnostic messages go to stdout, warnings and errors to
    stderr.
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        """
        Initialize console sink.

        Args:
            stdout: Stream for info/diagnostic output (defaults to sys.stdout)
            stderr: Stream for warning/error output (defaults to sys.stderr)
        """
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def write_info(self, text: str):
        print(text, file=self.stdout)

    def write_warning(self, condition: bool, text: str):
        if not condition:
            print(text, file=self.stderr)

    def write_error(self, text: str):
        print(text, file=self.stderr)

    def write_diagnostic(self, text: str):
        print(text, file=self.stdout)


class MemorySink(SinkBackend):
    """
    In-memory sink for testing.

    Records every call as a (channel, text) tuple. Warning calls record
    their condition flag as well.
    """

    def __init__(self):
        self.records: List[Tuple[str, str]] = []
        self.warning_flags: List[bool] = []

    def write_info(self, text: str):
        self.records.append((INFO, text))

    def write_warning(self, condition: bool, text: str):
        self.warning_flags.append(condition)
        self.records.append((WARNING, text))

    def write_error(self, text: str):
        self.records.append((ERROR, text))

    def write_diagnostic(self, text: str):
        self.records.append((DIAGNOSTIC, text))

    def texts(self, channel: Optional[str] = None) -> List[str]:
        """Get recorded texts, optionally for one channel only."""
        return [text for name, text in self.records if channel is None or name == channel]

    def clear(self):
        """Clear all records (useful for testing)."""
        self.records.clear()
        self.warning_flags.clear()
