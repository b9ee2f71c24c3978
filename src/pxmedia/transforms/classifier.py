"""Declaration classifier: flags the layout patterns a rule contains."""

from __future__ import annotations

from dataclasses import dataclass

from pxmedia.css.model import Declaration, Rule


@dataclass
class RuleFlags:
    """Patterns seen across one rule's declarations."""

    full_percent_width: bool = False  # width: 100%
    full_vw_width: bool = False  # width: 100vw
    fixed: bool = False  # position: fixed

    @property
    def full_width(self) -> bool:
        return self.full_percent_width or self.full_vw_width


def classify_declaration(decl: Declaration, flags: RuleFlags) -> RuleFlags:
    """Raise any flag *decl* triggers on *flags* and return it."""
    if decl.prop == "width" and decl.value == "100%":
        flags.full_percent_width = True
    if decl.prop == "width" and decl.value == "100vw":
        flags.full_vw_width = True
    if decl.prop == "position" and decl.value == "fixed":
        flags.fixed = True
    return flags


def classify_rule(rule: Rule) -> RuleFlags:
    flags = RuleFlags()
    for decl in rule.declarations:
        classify_declaration(decl, flags)
    return flags
