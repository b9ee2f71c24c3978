"""Render the stylesheet model back to CSS text."""

from __future__ import annotations

from pxmedia.css.model import AtRule, Declaration, Node, Rule, Stylesheet

__all__ = ["stringify"]


def _render(node: Node, depth: int, indent: str) -> list[str]:
    pad = indent * depth
    if isinstance(node, Declaration):
        return [f"{pad}{node};"]
    if isinstance(node, Rule):
        lines = [f"{pad}{node.selector} {{"]
        lines.extend(f"{pad}{indent}{decl};" for decl in node.declarations)
        lines.append(f"{pad}}}")
        return lines
    head = f"@{node.name} {node.params}" if node.params else f"@{node.name}"
    if not node.has_block:
        return [f"{pad}{head};"]
    lines = [f"{pad}{head} {{"]
    for child in node.nodes:
        lines.extend(_render(child, depth + 1, indent))
    lines.append(f"{pad}}}")
    return lines


def stringify(stylesheet: Stylesheet, indent: str = "  ") -> str:
    """Serialize *stylesheet*; top-level nodes are separated by a blank line."""
    blocks = ["\n".join(_render(node, 0, indent)) for node in stylesheet.nodes]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
