"""pxmedia - scale a mobile stylesheet into desktop and landscape media blocks."""

__version__ = "0.1.0"

from pxmedia.config import MediaViewportConfig, load_config  # noqa: E402
from pxmedia.errors import ConfigError, ParseError, PxMediaError  # noqa: E402
from pxmedia.transforms.media_viewport import (  # noqa: E402
    MediaViewportTransform,
    convert_css,
    transform_stylesheet,
)

__all__ = [
    "__version__",
    "MediaViewportConfig",
    "load_config",
    "ConfigError",
    "ParseError",
    "PxMediaError",
    "MediaViewportTransform",
    "convert_css",
    "transform_stylesheet",
]
