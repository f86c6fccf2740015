"""
Container rendering.

Two interchangeable layouts for mappings (and lists/tuples, keyed by
index):

Bracketed:
    {
        ["name"] = "x",
        ["pos"] = {
            [0] = 1,
            [1] = 2
        }
    }

Tree:
    ├─ ["name"]: "x"
    └─ ["pos"]:
       ├─ [0]: 1
       └─ [1]: 2
"""

from collections.abc import Mapping
from typing import Any, Iterator, List, Tuple

from . import values
from .style import DEFAULT_STYLE, RenderStyle

BRANCH = "├─ "
LAST_BRANCH = "└─ "
PIPE_PAD = "│  "
BLANK_PAD = "   "


def is_container(value: Any) -> bool:
    """Check whether a value renders as a keyed container."""
    return isinstance(value, (Mapping, list, tuple))


def entries(container: Any) -> Iterator[Tuple[Any, Any]]:
    """Yield (key, value) pairs in the container's own order."""
    if isinstance(container, Mapping):
        yield from container.items()
    else:
        yield from enumerate(container)


def render_bracketed(
    container: Any,
    style: RenderStyle = DEFAULT_STYLE,
    depth: int = 1,
    seen: Tuple[int, ...] = ()
) -> str:
    """
    Render a container as an indented { [key] = value } block.

    Args:
        container: Mapping, list or tuple
        style: Rendering style (tab_width controls indentation)
        depth: Nesting level of the entries; closing brace sits at depth - 1
        seen: ids of enclosing containers, used to cut cycles

    Returns:
        Multi-line block, or "{}" for an empty container
    """
    items = list(entries(container))
    if not items:
        return "{}"

    seen = seen + (id(container),)
    indent = " " * (style.tab_width * depth)
    lines = []
    for key, value in items:
        rendered_key = values.render_key(key, style)
        rendered = values.render_nested(value, style, depth + 1, seen)
        lines.append(f"{indent}[{rendered_key}] = {rendered}")

    closing_indent = " " * (style.tab_width * (depth - 1))
    return "{\n" + ",\n".join(lines) + f"\n{closing_indent}}}"


def render_tree(
    container: Any,
    style: RenderStyle = DEFAULT_STYLE,
    indent: str = "",
    seen: Tuple[int, ...] = ()
) -> str:
    """
    Render a container as an ASCII tree with branch connectors.

    Args:
        container: Mapping, list or tuple
        style: Rendering style
        indent: Prefix for every line at this level
        seen: ids of enclosing containers, used to cut cycles

    Returns:
        Tree lines joined with newlines; "" for an empty container
    """
    items = list(entries(container))
    size = len(items)
    seen = seen + (id(container),)
    lines: List[str] = []

    for current, (key, value) in enumerate(items, 1):
        is_last = current == size
        connector = LAST_BRANCH if is_last else BRANCH
        header = f"{indent}{connector}[{values.render_key(key, style)}]:"

        if is_container(value) and id(value) not in seen:
            lines.append(header)
            child_indent = indent + (BLANK_PAD if is_last else PIPE_PAD)
            child = render_tree(value, style, child_indent, seen)
            if child:
                lines.append(child)
        else:
            rendered = values.render_nested(value, style, 1, seen)
            lines.append(f"{header} {rendered}")

    return "\n".join(lines)
