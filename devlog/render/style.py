"""Rendering style shared by the value and container renderers."""

from dataclasses import dataclass

BRACKETED = "bracketed"
TREE = "tree"

STYLES = (BRACKETED, TREE)


@dataclass(frozen=True)
class RenderStyle:
    """
    Rendering options threaded through recursive calls.

    Attributes:
        kind: "bracketed" for indented { [k] = v } blocks, "tree" for
            ├─/└─ connectors
        tab_width: Spaces per nesting level in bracketed style
        root_marker: Prefix for qualified host-object names
    """

    kind: str = BRACKETED
    tab_width: int = 4
    root_marker: str = ""

    @property
    def is_tree(self) -> bool:
        return self.kind == TREE


DEFAULT_STYLE = RenderStyle()
