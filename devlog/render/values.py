"""
Value rendering.

Turns arbitrary runtime values into the text used in message bodies.
Strings are quoted verbatim, numbers and booleans use their canonical
form, containers are handed to the container renderer and host objects
that know their qualified name render as that name.
"""

import numbers
from typing import Any, Protocol, Tuple, runtime_checkable

from .containers import is_container, render_bracketed, render_tree
from .style import DEFAULT_STYLE, RenderStyle

CYCLE_MARKER = "<cycle>"


@runtime_checkable
class HasQualifiedName(Protocol):
    """Host object able to report its full hierarchical name."""

    def get_full_name(self) -> str: ...


def render_value(value: Any, style: RenderStyle = DEFAULT_STYLE) -> str:
    """
    Render a single value for a message body.

    Args:
        value: Any object
        style: Rendering style

    Returns:
        Text representation; never raises
    """
    return render_nested(value, style, depth=1, seen=())


def render_nested(
    value: Any,
    style: RenderStyle,
    depth: int,
    seen: Tuple[int, ...]
) -> str:
    """
    Render a value found at a given nesting depth.

    Args:
        value: Any object
        style: Rendering style
        depth: Bracketed-style nesting level (1 for top level)
        seen: ids of the containers currently being rendered

    Returns:
        Text representation
    """
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Number):
        return str(value)
    if value is None:
        return "None"

    if is_container(value):
        if id(value) in seen:
            return CYCLE_MARKER
        if style.is_tree:
            tree = render_tree(value, style, seen=seen)
            return f"\n{tree}" if tree else "{}"
        return render_bracketed(value, style, depth=depth, seen=seen)

    if isinstance(value, HasQualifiedName):
        try:
            name = value.get_full_name()
        except Exception:
            return type_name(value)
        return f"{style.root_marker}{name}"

    return type_name(value)


def render_key(key: Any, style: RenderStyle = DEFAULT_STYLE) -> str:
    """Render a mapping key: strings quoted, scalars as values, else str()."""
    if isinstance(key, (str, bool, numbers.Number)) or key is None:
        return render_nested(key, style, depth=1, seen=())
    if isinstance(key, HasQualifiedName):
        return render_nested(key, style, depth=1, seen=())
    try:
        return str(key)
    except Exception:
        return type_name(key)


def type_name(value: Any) -> str:
    return f"<{type(value).__name__}>"
