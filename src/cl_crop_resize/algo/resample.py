"""Resample a crop rectangle into a newly allocated destination image."""

from PIL import Image

from ..schema import ResizeGeometry
from ..utils.profiling import timed

RESAMPLE_FILTER = Image.Resampling.BICUBIC

# Pillow only does nearest-neighbour on these modes; the destination is
# always truecolor.
_PALETTE_MODES = ("1", "P", "PA")


def to_truecolor(image: Image.Image) -> Image.Image:
    if image.mode not in _PALETTE_MODES:
        return image
    if image.mode == "1":
        return image.convert("L")
    if image.mode == "PA" or "transparency" in image.info:
        return image.convert("RGBA")
    return image.convert("RGB")


@timed
def resample(image: Image.Image, geometry: ResizeGeometry) -> Image.Image:
    """
    Scale the crop region of ``image`` to ``geometry.size``.

    Returns a new image; ``image`` is left untouched.

    Args:
        image: Decoded source image
        geometry: Crop rectangle and destination size

    Returns:
        Resampled image of exactly ``geometry.size``
    """
    source = to_truecolor(image)
    size = geometry.size
    crop = geometry.crop

    if crop.within(source.width, source.height):
        return source.resize(size, RESAMPLE_FILTER, box=crop.box)

    # Pillow fills the part of a crop box outside the image with zeros
    region = source.crop(tuple(round(v) for v in crop.box))
    return region.resize(size, RESAMPLE_FILTER)
