"""Trace capture and parsing."""

from .parser import (
    FRAME,
    SWEEP,
    TRACE_MODES,
    TraceFrame,
    format_frame_line,
    parse_frame,
    parse_single_frame,
    parse_sweep,
    parse_trace,
    strip_seed,
)
from .source import StackTraceSource, StaticTraceSource, TraceSource

__all__ = [
    "TraceFrame",
    "parse_frame",
    "format_frame_line",
    "parse_sweep",
    "parse_single_frame",
    "parse_trace",
    "strip_seed",
    "SWEEP",
    "FRAME",
    "TRACE_MODES",
    "TraceSource",
    "StackTraceSource",
    "StaticTraceSource",
]
