from pxmedia.config import MediaViewportConfig
from pxmedia.css.model import Stylesheet
from pxmedia.transforms.base import Transform
from pxmedia.transforms.media_viewport import MediaViewportTransform


def apply_transforms(
    stylesheet: Stylesheet,
    config: MediaViewportConfig | None = None,
    custom_transforms: list[Transform] | None = None,
) -> Stylesheet:
    """Apply the media viewport transform (and any custom ones) to *stylesheet*."""
    transforms: list[Transform] = [MediaViewportTransform(config)]
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        stylesheet = t.apply(stylesheet)
    return stylesheet
