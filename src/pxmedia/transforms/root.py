"""Centre and cap the width of the page's root container."""

from __future__ import annotations

from pxmedia.transforms import declarations as d
from pxmedia.transforms.context import MediaContext


def append_root_centre(ctx: MediaContext, selector: str) -> None:
    """Emit max-width + auto margins (and the optional border) for *selector*."""
    common = [d.MARGIN_LEFT, d.MARGIN_RIGHT]
    if ctx.config.border:
        common += [
            d.CONTENT_BOX,
            d.border_left(),
            d.border_right(),
            d.MIN_FULL_HEIGHT,
            d.AUTO_HEIGHT,
        ]
    ctx.place(
        selector,
        desktop_own=[d.max_width(ctx.config.desktop_width)],
        landscape_own=[d.max_width(ctx.config.landscape_width)],
        common=common,
    )
