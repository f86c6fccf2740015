"""
Formatter configuration.

Settings come from an optional JSON file and are then overridden by
environment variables (a local .env file is loaded first):

    DEVLOG_STYLE         bracketed | tree
    DEVLOG_TAB_WIDTH     spaces per nesting level
    DEVLOG_ROOT_MARKER   prefix for qualified host-object names
    DEVLOG_TRACE_MODE    sweep | frame
    DEVLOG_SCRIPT_ROOT   marker of the application's own frames
    DEVLOG_EXTRA_SKIP    extra trace header lines to drop
"""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError
from .render.style import BRACKETED, STYLES, TREE, RenderStyle
from .trace.parser import SWEEP, TRACE_MODES

TREE_ROOT_MARKER = "root."

ENV_VARS = {
    "style": "DEVLOG_STYLE",
    "tab_width": "DEVLOG_TAB_WIDTH",
    "root_marker": "DEVLOG_ROOT_MARKER",
    "trace_mode": "DEVLOG_TRACE_MODE",
    "script_root": "DEVLOG_SCRIPT_ROOT",
    "extra_skip_lines": "DEVLOG_EXTRA_SKIP",
}

INT_FIELDS = ("tab_width", "extra_skip_lines")


@dataclass
class FormatterConfig:
    """Options for rendering values and parsing traces."""

    style: str = BRACKETED
    tab_width: int = 4
    root_marker: Optional[str] = None
    trace_mode: str = SWEEP
    script_root: str = field(default_factory=lambda: str(Path.cwd()))
    extra_skip_lines: int = 0

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ConfigError for unknown choices or negative counts."""
        if self.style not in STYLES:
            raise ConfigError(f"Unknown style: {self.style}")
        if self.trace_mode not in TRACE_MODES:
            raise ConfigError(f"Unknown trace mode: {self.trace_mode}")
        if self.tab_width < 0:
            raise ConfigError(f"tab_width must be >= 0, got {self.tab_width}")
        if self.extra_skip_lines < 0:
            raise ConfigError(
                f"extra_skip_lines must be >= 0, got {self.extra_skip_lines}"
            )

    def render_style(self) -> RenderStyle:
        """Build the RenderStyle; tree style defaults to the 'root.' marker."""
        root_marker = self.root_marker
        if root_marker is None:
            root_marker = TREE_ROOT_MARKER if self.style == TREE else ""
        return RenderStyle(
            kind=self.style,
            tab_width=self.tab_width,
            root_marker=root_marker
        )


def load_config(path: Optional[str] = None, use_env: bool = True) -> FormatterConfig:
    """
    Load formatter configuration.

    Args:
        path: Optional JSON file with FormatterConfig field names as keys
        use_env: Apply .env / environment overrides

    Returns:
        FormatterConfig

    Raises:
        FileNotFoundError: If path is given but does not exist
        ConfigError: If a value is invalid
    """
    values = {}

    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        known = {item.name for item in fields(FormatterConfig)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        values.update(data)

    if use_env:
        load_dotenv()
        for name, env_var in ENV_VARS.items():
            raw = os.getenv(env_var)
            if raw is not None:
                values[name] = raw

    for name in INT_FIELDS:
        if name in values:
            try:
                values[name] = int(values[name])
            except (TypeError, ValueError):
                raise ConfigError(f"{name} must be an integer, got {values[name]!r}")

    return FormatterConfig(**values)
