"""Exception hierarchy for image loading, resizing and encoding."""

from typing_extensions import override


class ImageError(Exception):
    """Base class for every error raised by cl_crop_resize."""

    def __init__(self, message: str = "An unknown image error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message


# ─────────────────────────────────────────────────────────────
# Construction errors (propagate unwrapped)
# ─────────────────────────────────────────────────────────────


class ImageFileNotFoundError(ImageError, FileNotFoundError):
    """The path does not reference an existing file."""


class InvalidImageDataError(ImageError):
    """No usable width/height could be read from the file."""


class UnsupportedFormatError(ImageError):
    """The file is an image, but not JPEG, PNG or GIF."""


# ─────────────────────────────────────────────────────────────
# Configuration and pipeline errors
# ─────────────────────────────────────────────────────────────


class InvalidQualitySettingError(ImageError, ValueError):
    """Quality was applied to a lossless format, or is out of range."""


class InvalidResizeDimensionsError(ImageError, ValueError):
    pass


class ZeroSourceDimensionError(ImageError):
    pass


class EncodingFailureError(ImageError):
    pass


class ResizeFailedError(ImageError):
    """Raised by ``SourceImage.resize`` around any pipeline failure.

    The original error is chained as ``__cause__`` and exposed as ``cause``.
    """

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__
