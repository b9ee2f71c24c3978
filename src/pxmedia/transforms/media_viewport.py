"""Media viewport transform: derive desktop and landscape media blocks.

Viewports fall into three classes: mobile portrait, mobile landscape and
desktop. Portrait is left to the source stylesheet. For the other two this
transform appends ``@media`` blocks where every px length is scaled by
``target width / design width``, full-width fixed bars and ``100vw`` widths
are pinned to the target width, and the root container is centred.
"""

from __future__ import annotations

import logging
from typing import Any

from pxmedia.config import MediaViewportConfig
from pxmedia.css.model import Stylesheet, is_nested
from pxmedia.css.parser import parse_stylesheet
from pxmedia.css.serializer import stringify
from pxmedia.transforms.assembler import finalize
from pxmedia.transforms.classifier import RuleFlags, classify_declaration
from pxmedia.transforms.context import MediaContext
from pxmedia.transforms.patterns import append_scaled_length, apply_rule_patterns
from pxmedia.transforms.root import append_root_centre

logger = logging.getLogger(__name__)


class MediaViewportTransform:
    """Append the desktop, landscape and shared media blocks to a stylesheet.

    Rules already inside an at-rule are left alone, so running the transform
    over its own output does not scale the generated blocks again. The
    original rules are never modified; the stylesheet is mutated only by
    appending up to three ``@media`` blocks.
    """

    def __init__(self, config: MediaViewportConfig | None = None) -> None:
        self.config = config if config is not None else MediaViewportConfig()

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        ctx = MediaContext(self.config)
        root_selector = self.config.root_selector

        for rule in list(stylesheet.walk_rules()):
            if is_nested(rule):
                continue
            selector = rule.selector

            if selector == root_selector:
                logger.debug("Centring root container %s", selector)
                append_root_centre(ctx, selector)

            flags = RuleFlags()
            for decl in list(rule.declarations):
                classify_declaration(decl, flags)
                append_scaled_length(ctx, selector, decl)

            pattern = apply_rule_patterns(ctx, selector, flags)
            if pattern:
                logger.debug("Rule %s matched %s", selector, pattern)

        appended = finalize(stylesheet, ctx)
        logger.info(
            "Media viewport transform appended %d block(s) with %d rule(s)",
            len(appended),
            sum(len(block.nodes) for block in appended),
        )
        return stylesheet


def _resolve(config: MediaViewportConfig | None, options: dict[str, Any]) -> MediaViewportConfig:
    return MediaViewportConfig.from_options(options, base=config)


def transform_stylesheet(
    stylesheet: Stylesheet, config: MediaViewportConfig | None = None, **options: Any
) -> Stylesheet:
    """Apply the media viewport transform in place and return *stylesheet*.

    Keyword *options* (camelCase or snake_case) override *config*.
    """
    return MediaViewportTransform(_resolve(config, options)).apply(stylesheet)


def convert_css(source: str, config: MediaViewportConfig | None = None, **options: Any) -> str:
    """Parse *source*, apply the transform and serialize the result."""
    stylesheet = parse_stylesheet(source)
    return stringify(transform_stylesheet(stylesheet, config, **options))
