"""Rule pattern handlers.

Length declarations are scaled one at a time while a rule is scanned. The
width patterns run once per rule afterwards, dispatched through
:data:`RULE_PATTERNS` where the first matching predicate wins.
"""

from __future__ import annotations

from typing import Callable

from pxmedia.css.model import Declaration
from pxmedia.transforms import declarations as d
from pxmedia.transforms.classifier import RuleFlags
from pxmedia.transforms.context import MediaContext
from pxmedia.transforms.scaling import has_px, scale_px


def append_scaled_length(ctx: MediaContext, selector: str, decl: Declaration) -> bool:
    """Emit ratio-scaled copies of *decl* per enabled class.

    Returns False (and emits nothing) when the value holds no px length.
    """
    if not has_px(decl.value):
        return False
    if ctx.desktop_enabled:
        ctx.emit(
            ctx.desktop,
            selector,
            Declaration(decl.prop, scale_px(decl.value, ctx.config.desktop_ratio), decl.important),
        )
    if ctx.landscape_enabled:
        ctx.emit(
            ctx.landscape,
            selector,
            Declaration(decl.prop, scale_px(decl.value, ctx.config.landscape_ratio), decl.important),
        )
    return True


def append_fixed_full_width_centre(ctx: MediaContext, selector: str) -> None:
    """``position: fixed`` + full width becomes a centred fixed-width bar."""
    ctx.place(
        selector,
        desktop_own=[d.width(ctx.config.desktop_width)],
        landscape_own=[d.width(ctx.config.landscape_width)],
        common=[d.MARGIN_LEFT, d.MARGIN_RIGHT, d.LEFT, d.RIGHT],
    )


def append_static_width_from_full_vw(ctx: MediaContext, selector: str) -> None:
    """``width: 100vw`` becomes the target width of each class."""
    if ctx.desktop_enabled:
        ctx.emit(ctx.desktop, selector, d.width(ctx.config.desktop_width))
    if ctx.landscape_enabled:
        ctx.emit(ctx.landscape, selector, d.width(ctx.config.landscape_width))


PatternPredicate = Callable[[RuleFlags], bool]
PatternHandler = Callable[[MediaContext, str], None]

RULE_PATTERNS: list[tuple[str, PatternPredicate, PatternHandler]] = [
    ("fixed-full-width", lambda f: f.fixed and f.full_width, append_fixed_full_width_centre),
    ("full-vw-width", lambda f: f.full_vw_width, append_static_width_from_full_vw),
]


def apply_rule_patterns(ctx: MediaContext, selector: str, flags: RuleFlags) -> str | None:
    """Run the first pattern matching *flags*; return its name, or None."""
    for name, predicate, handler in RULE_PATTERNS:
        if predicate(flags):
            handler(ctx, selector)
            return name
    return None
