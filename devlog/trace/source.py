"""
Trace sources.

A trace source returns a raw, multi-line stack dump with the seed message
at its head. StackTraceSource builds one from the live Python stack;
StaticTraceSource replays fixed text.
"""

import os
import traceback
from abc import ABC, abstractmethod
from typing import Optional

PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

TRACE_HEADER = "stack traceback:"


class TraceSource(ABC):
    """Abstract base class for trace sources."""

    @abstractmethod
    def capture(self, seed: str) -> str:
        """
        Capture the current call stack.

        Args:
            seed: Message to embed at the head of the trace

        Returns:
            Raw trace text
        """
        pass


class StackTraceSource(TraceSource):
    """
    Live Python stack, most recent call first.

    Output:
        <seed>
        stack traceback:
        \t/path/to/app.py:12: in function 'main'
        ...

    Frames inside the devlog package are left out so the trace starts at
    the caller.
    """

    def __init__(self, limit: Optional[int] = None):
        """
        Initialize stack trace source.

        Args:
            limit: Maximum number of frames to include (None for all)
        """
        self.limit = limit

    def capture(self, seed: str) -> str:
        frames = [
            frame for frame in traceback.extract_stack()
            if not _is_internal(frame.filename)
        ]
        frames.reverse()
        if self.limit is not None:
            frames = frames[:self.limit]

        lines = [seed, TRACE_HEADER]
        for frame in frames:
            lines.append(f"\t{frame.filename}:{frame.lineno}: in function '{frame.name}'")
        return "\n".join(lines)


class StaticTraceSource(TraceSource):
    """
    Fixed trace text, for tests and for replaying saved traces.

    The seed is prepended like a live host would.
    """

    def __init__(self, trace: str = "", embed_seed: bool = True):
        self.trace = trace
        self.embed_seed = embed_seed
        self.seeds = []

    def capture(self, seed: str) -> str:
        self.seeds.append(seed)
        if self.embed_seed:
            return f"{seed}\n{self.trace}"
        return self.trace


def _is_internal(filename: str) -> bool:
    return os.path.abspath(filename).startswith(PACKAGE_DIR + os.sep)
