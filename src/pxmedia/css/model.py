"""Stylesheet model: Declaration, Rule, AtRule and Stylesheet.

Declarations are immutable. Rules and at-rules are mutable tree nodes that
keep a back-reference to their parent container so nested rules can be
detected.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Declaration:
    """A single ``prop: value`` pair, optionally ``!important``."""

    prop: str
    value: str
    important: bool = False

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.prop}: {self.value}{suffix}"


@dataclass
class Rule:
    """A selector with its ordered declarations."""

    selector: str
    declarations: list[Declaration] = field(default_factory=list)
    parent: Container | None = field(default=None, repr=False, compare=False)

    def append(self, *declarations: Declaration) -> Rule:
        self.declarations.extend(declarations)
        return self

    def remove(self) -> None:
        """Detach this rule from its parent, if it has one."""
        if self.parent is not None:
            self.parent.remove(self)


class _ContainerMixin:
    """Child management shared by :class:`AtRule` and :class:`Stylesheet`."""

    nodes: list[Node]

    def append(self, *nodes: Node):
        for node in nodes:
            if isinstance(node, (Rule, AtRule)):
                node.parent = self  # type: ignore[assignment]
            self.nodes.append(node)
        return self

    def remove(self, node: Node) -> None:
        """Remove *node* by identity (equal-looking siblings are kept)."""
        for i, child in enumerate(self.nodes):
            if child is node:
                del self.nodes[i]
                if isinstance(node, (Rule, AtRule)):
                    node.parent = None
                return

    def walk_rules(self) -> Iterator[Rule]:
        """Yield every rule below this container, depth-first in document order."""
        for child in list(self.nodes):
            if isinstance(child, Rule):
                yield child
            elif isinstance(child, AtRule):
                yield from child.walk_rules()

    @property
    def rules(self) -> list[Rule]:
        """Direct child rules only."""
        return [n for n in self.nodes if isinstance(n, Rule)]

    @property
    def at_rules(self) -> list[AtRule]:
        """Direct child at-rules only."""
        return [n for n in self.nodes if isinstance(n, AtRule)]


@dataclass
class AtRule(_ContainerMixin):
    """An at-rule such as ``@media``; a conditional block when it has a body.

    Statement at-rules (``@import url(a.css);``) have ``has_block=False``.
    """

    name: str
    params: str = ""
    nodes: list[Node] = field(default_factory=list)
    parent: Container | None = field(default=None, repr=False, compare=False)
    has_block: bool = True

    def __post_init__(self) -> None:
        for node in self.nodes:
            if isinstance(node, (Rule, AtRule)):
                node.parent = self


@dataclass
class Stylesheet(_ContainerMixin):
    """Root of a parsed stylesheet."""

    nodes: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        for node in self.nodes:
            if isinstance(node, (Rule, AtRule)):
                node.parent = self


Node = Union[Rule, AtRule, Declaration]
Container = Union[AtRule, Stylesheet]


def is_nested(rule: Rule) -> bool:
    """Return True if *rule* sits inside an at-rule rather than at the top level."""
    return isinstance(rule.parent, AtRule)
