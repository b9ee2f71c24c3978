"""Merge and append the media blocks once traversal is done."""

from __future__ import annotations

import logging

from pxmedia.css.model import AtRule, Rule, Stylesheet
from pxmedia.transforms.context import MediaContext

logger = logging.getLogger(__name__)


def merge_rules(block: AtRule) -> AtRule:
    """Fold rules sharing a selector into the first one, in encounter order."""
    seen: dict[str, Rule] = {}
    for rule in block.walk_rules():
        first = seen.get(rule.selector)
        if first is None:
            seen[rule.selector] = rule
        else:
            first.append(*rule.declarations)
            rule.remove()
    return block


def finalize(stylesheet: Stylesheet, ctx: MediaContext) -> list[AtRule]:
    """Append the non-empty blocks to *stylesheet* and return them.

    The shared block is only appended when both the desktop and landscape
    blocks are.
    """
    appended: list[AtRule] = []
    has_desktop = len(ctx.desktop.nodes) > 0
    has_landscape = len(ctx.landscape.nodes) > 0
    candidates = [
        ("desktop", ctx.desktop, has_desktop),
        ("landscape", ctx.landscape, has_landscape),
        ("shared", ctx.shared, has_desktop and has_landscape),
    ]
    for label, block, wanted in candidates:
        if not wanted:
            continue
        merge_rules(block)
        stylesheet.append(block)
        appended.append(block)
        logger.debug("Appended %s block with %d rule(s)", label, len(block.nodes))
    return appended
