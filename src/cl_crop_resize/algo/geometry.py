"""Pure crop-to-fill geometry.

Given a source size and a requested target box (either side optional), work
out which part of the source to keep and the exact destination size. The
result always fills the target box: excess source content is cropped away
instead of letterboxing or stretching.

All values stay real-valued here; they are truncated to whole pixels when
the destination buffer is allocated (``ResizeGeometry.size``).
"""

from loguru import logger

from ..errors import InvalidResizeDimensionsError, ZeroSourceDimensionError
from ..schema import CropRectangle, ResizeGeometry, ResizeRequest


def _normalize_side(value: float | None, name: str) -> float | None:
    # 0 means "not given", like None
    if not value:
        return None
    if value < 0:
        raise InvalidResizeDimensionsError(f"Cannot resize to a negative {name} ({value})")
    return float(value)


def compute_geometry(
    src_width: float,
    src_height: float,
    width: float | None = None,
    height: float | None = None,
) -> ResizeGeometry:
    """
    Compute the source crop rectangle and destination size for a resize.

    Args:
        src_width: Source image width
        src_height: Source image height
        width: Target width (None or 0 = derive from height)
        height: Target height (None or 0 = derive from width)

    Returns:
        ResizeGeometry with the crop rectangle and real-valued destination size

    Raises:
        InvalidResizeDimensionsError: If both sides are missing or one is negative
        ZeroSourceDimensionError: If the source has a zero dimension
    """
    dst_w = _normalize_side(width, "width")
    dst_h = _normalize_side(height, "height")

    if dst_w is None and dst_h is None:
        raise InvalidResizeDimensionsError("Cannot resize an image to zero by zero pixels")

    if src_width <= 0 or src_height <= 0:
        raise ZeroSourceDimensionError(
            f"Unable to resize {src_width}x{src_height} image, one of its dimensions is zero"
        )

    src_x = 0.0
    src_y = 0.0
    src_w = float(src_width)
    src_h = float(src_height)

    aspect = src_w / src_h
    dst_w, dst_h = ResizeRequest(width=dst_w, height=dst_h).resolve(aspect)

    # Equal width and height
    if dst_w == dst_h:
        # The offset is subtracted once and both axes use src_w - src_h, so
        # the crop is not a centred square.
        if aspect > 1:
            src_x = (src_w - src_h) / 2
            src_w -= src_x
        else:
            src_y = (src_w - src_h) / 2
            src_h -= src_y

    # Unequal width and height
    else:
        dst_aspect = dst_w / dst_h

        # Cut the height to make it fit
        if dst_aspect > aspect:
            ratio = src_w / dst_w
            src_y = (src_h - (dst_h * ratio)) / 2
            src_h = src_h - (2 * src_y)

        # Cut the width to make it fit
        else:
            ratio = src_h / dst_h
            src_x = (src_w - (dst_w * ratio)) / 2
            src_w = src_w - (2 * src_x)

    geometry = ResizeGeometry(
        crop=CropRectangle(x=src_x, y=src_y, w=src_w, h=src_h),
        width=dst_w,
        height=dst_h,
    )
    logger.debug(
        f"Geometry for {src_width}x{src_height} -> {dst_w:g}x{dst_h:g}: "
        f"crop=({src_x:g}, {src_y:g}, {src_w:g}, {src_h:g})"
    )
    return geometry
