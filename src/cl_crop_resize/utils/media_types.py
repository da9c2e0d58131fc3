from enum import StrEnum
from io import BytesIO

import magic


class ImageFormat(StrEnum):
    """Supported image formats; values are Pillow format names."""

    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"

    @classmethod
    def from_mime(cls, file_type: str) -> "ImageFormat | None":
        return _MIME_TO_FORMAT.get(file_type.lower())

    @property
    def mime_type(self) -> str:
        return f"image/{self.value.lower()}"

    @property
    def extension(self) -> str:
        return ".jpg" if self is ImageFormat.JPEG else f".{self.value.lower()}"

    @property
    def lossy(self) -> bool:
        return self is ImageFormat.JPEG


_MIME_TO_FORMAT: dict[str, ImageFormat] = {
    "image/jpeg": ImageFormat.JPEG,
    "image/jpg": ImageFormat.JPEG,
    "image/pjpeg": ImageFormat.JPEG,
    "image/png": ImageFormat.PNG,
    "image/gif": ImageFormat.GIF,
}


def determine_mime(bytes_io: BytesIO) -> str:
    _ = bytes_io.seek(0)
    mime = magic.Magic(mime=True)

    file_type = mime.from_buffer(bytes_io.getvalue())
    if not file_type:
        file_type = "application/octet-stream"
    return file_type


def determine_format(bytes_io: BytesIO) -> ImageFormat | None:
    """Detect the image format from content bytes, ignoring any file name."""
    return ImageFormat.from_mime(determine_mime(bytes_io))
