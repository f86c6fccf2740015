"""Value and container renderers."""

from .values import (
    CYCLE_MARKER,
    HasQualifiedName,
    render_key,
    render_nested,
    render_value,
    type_name,
)
from .containers import is_container, render_bracketed, render_tree
from .style import BRACKETED, DEFAULT_STYLE, STYLES, TREE, RenderStyle

__all__ = [
    "render_value",
    "render_nested",
    "render_key",
    "type_name",
    "HasQualifiedName",
    "CYCLE_MARKER",
    "is_container",
    "render_bracketed",
    "render_tree",
    "RenderStyle",
    "DEFAULT_STYLE",
    "BRACKETED",
    "TREE",
    "STYLES",
]
