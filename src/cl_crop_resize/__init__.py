"""cl_crop_resize - Crop-to-fill resizing for JPEG, PNG and GIF images."""

from .algo.geometry import compute_geometry
from .errors import (
    EncodingFailureError,
    ImageError,
    ImageFileNotFoundError,
    InvalidImageDataError,
    InvalidQualitySettingError,
    InvalidResizeDimensionsError,
    ResizeFailedError,
    UnsupportedFormatError,
    ZeroSourceDimensionError,
)
from .image import SourceImage, load_image
from .schema import (
    DEFAULT_QUALITY,
    CropRectangle,
    EncodeOptions,
    ResizeGeometry,
    ResizeRequest,
)
from .utils.media_types import ImageFormat

__version__ = "0.1.0"

__all__ = [
    "SourceImage",
    "load_image",
    "compute_geometry",
    "ImageFormat",
    "EncodeOptions",
    "ResizeRequest",
    "CropRectangle",
    "ResizeGeometry",
    "DEFAULT_QUALITY",
    "ImageError",
    "ImageFileNotFoundError",
    "InvalidImageDataError",
    "UnsupportedFormatError",
    "InvalidQualitySettingError",
    "InvalidResizeDimensionsError",
    "ZeroSourceDimensionError",
    "EncodingFailureError",
    "ResizeFailedError",
    "__version__",
]
