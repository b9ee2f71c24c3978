"""Transform configuration: defaults, option merging and validation."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from pxmedia.errors import ConfigError

logger = logging.getLogger(__name__)

# camelCase option names accepted from callers and config files.
OPTION_ALIASES: dict[str, str] = {
    "viewportWidth": "viewport_width",
    "desktopWidth": "desktop_width",
    "landscapeWidth": "landscape_width",
    "yAxisBreakPoint": "y_axis_break_point",
    "xAxisBreakPoint": "x_axis_break_point",
    "rootClass": "root_class",
    "border": "border",
    "disableDesktop": "disable_desktop",
    "disableLandscape": "disable_landscape",
}

_NUMBER_FIELDS = (
    "viewport_width",
    "desktop_width",
    "landscape_width",
    "x_axis_break_point",
)
_FLAG_FIELDS = ("border", "disable_desktop", "disable_landscape")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class MediaViewportConfig:
    """Resolved settings for one transformation pass.

    Attributes:
        viewport_width: Width of the mobile design the source px values assume.
        desktop_width: Rendered app width on desktop viewports.
        landscape_width: Rendered app width on landscape phones.
        y_axis_break_point: Viewport width above which the desktop width
            applies. ``None`` means "same as desktop_width".
        x_axis_break_point: Viewport height below which a wide viewport is
            treated as a landscape phone.
        root_class: Class name (without the dot) of the page's outer wrapper.
        border: Draw a thin border on both sides of the root container.
        disable_desktop: Skip the desktop media block.
        disable_landscape: Skip the landscape media block.
    """

    viewport_width: float = 750
    desktop_width: float = 600
    landscape_width: float = 425
    y_axis_break_point: float | None = None
    x_axis_break_point: float = 640
    root_class: str = "root-class"
    border: bool = False
    disable_desktop: bool = False
    disable_landscape: bool = False

    def __post_init__(self) -> None:
        for name in _NUMBER_FIELDS:
            value = getattr(self, name)
            if not _is_number(value) or value <= 0:
                raise ConfigError(f"{name} must be a positive number, got {value!r}")
        if self.y_axis_break_point is not None and (
            not _is_number(self.y_axis_break_point) or self.y_axis_break_point <= 0
        ):
            raise ConfigError(
                f"y_axis_break_point must be a positive number or None, "
                f"got {self.y_axis_break_point!r}"
            )
        for name in _FLAG_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a boolean, got {getattr(self, name)!r}")
        if not isinstance(self.root_class, str) or not self.root_class:
            raise ConfigError(f"root_class must be a non-empty string, got {self.root_class!r}")

    # --- derived values -------------------------------------------------------

    @property
    def y_break_point(self) -> float:
        if self.y_axis_break_point is None:
            return self.desktop_width
        return self.y_axis_break_point

    @property
    def desktop_ratio(self) -> float:
        return self.desktop_width / self.viewport_width

    @property
    def landscape_ratio(self) -> float:
        return self.landscape_width / self.viewport_width

    @property
    def desktop_enabled(self) -> bool:
        return not self.disable_desktop

    @property
    def landscape_enabled(self) -> bool:
        return not self.disable_landscape

    @property
    def root_selector(self) -> str:
        return f".{self.root_class}"

    # --- construction ---------------------------------------------------------

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any] | None = None, base: MediaViewportConfig | None = None
    ) -> MediaViewportConfig:
        """Merge caller *options* onto *base* (or the defaults).

        Keys may use either the camelCase option names (``desktopWidth``) or
        the dataclass field names (``desktop_width``). Unknown keys are logged
        and ignored.
        """
        base = base if base is not None else cls()
        if not options:
            return base
        field_names = {f.name for f in fields(cls)}
        updates: dict[str, Any] = {}
        for key, value in options.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in field_names:
                logger.warning("Ignoring unknown option %r", key)
                continue
            updates[name] = value
        return replace(base, **updates)


def load_config(path: str | Path) -> MediaViewportConfig:
    """Load a JSON object of options from *path* and build a config from it."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")
    logger.debug("Loaded %d option(s) from %s", len(data), config_path)
    return MediaViewportConfig.from_options(data)
