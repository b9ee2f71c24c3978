"""Per-pass transform context: the config plus the three media accumulators."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from pxmedia.config import MediaViewportConfig
from pxmedia.css.model import AtRule, Declaration, Rule
from pxmedia.transforms.scaling import format_number


def desktop_params(config: MediaViewportConfig) -> str:
    y = format_number(config.y_break_point)
    x = format_number(config.x_axis_break_point)
    return f"(min-width: {y}px) and (min-height: {x}px)"


def landscape_params(config: MediaViewportConfig) -> str:
    y = format_number(config.y_break_point)
    x = format_number(config.x_axis_break_point)
    return (
        f"((min-width: {y}px) and (max-height: {x}px)) "
        f"or ((max-width: {y}px) and (orientation: landscape))"
    )


def shared_params(config: MediaViewportConfig) -> str:
    # The missing "px" on the second max-width is kept for output compatibility.
    y = format_number(config.y_break_point)
    return f"(min-width: {y}px) or ((orientation: landscape) and (max-width: {y}))"


@dataclass
class MediaContext:
    """Threaded through every handler of one transformation pass."""

    config: MediaViewportConfig
    desktop: AtRule = field(init=False)
    landscape: AtRule = field(init=False)
    shared: AtRule = field(init=False)

    def __post_init__(self) -> None:
        self.desktop = AtRule(name="media", params=desktop_params(self.config))
        self.landscape = AtRule(name="media", params=landscape_params(self.config))
        self.shared = AtRule(name="media", params=shared_params(self.config))

    @property
    def desktop_enabled(self) -> bool:
        return self.config.desktop_enabled

    @property
    def landscape_enabled(self) -> bool:
        return self.config.landscape_enabled

    def emit(self, block: AtRule, selector: str, *declarations: Declaration) -> Rule:
        """Append a new rule for *selector* carrying *declarations* to *block*."""
        rule = Rule(selector=selector).append(*declarations)
        block.append(rule)
        return rule

    def place(
        self,
        selector: str,
        desktop_own: Sequence[Declaration],
        landscape_own: Sequence[Declaration],
        common: Sequence[Declaration],
    ) -> None:
        """Distribute declarations over the blocks.

        With both classes enabled each class gets its own declarations and
        *common* goes to the shared block once. With a single class enabled
        that class gets everything. With neither nothing is emitted.
        """
        if self.desktop_enabled and self.landscape_enabled:
            self.emit(self.desktop, selector, *desktop_own)
            self.emit(self.landscape, selector, *landscape_own)
            self.emit(self.shared, selector, *common)
        elif self.landscape_enabled:
            self.emit(self.landscape, selector, *landscape_own, *common)
        elif self.desktop_enabled:
            self.emit(self.desktop, selector, *desktop_own, *common)
