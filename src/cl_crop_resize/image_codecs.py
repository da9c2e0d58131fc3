"""Per-format decode/encode strategies and header probing."""

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing_extensions import override

from loguru import logger
from PIL import Image, UnidentifiedImageError

from .errors import (
    EncodingFailureError,
    ImageFileNotFoundError,
    InvalidImageDataError,
    UnsupportedFormatError,
)
from .schema import EncodeOptions
from .utils.media_types import ImageFormat, determine_format

# libmagic needs no more than this to recognise the supported formats
MAGIC_HEADER_BYTES = 2048


def probe_image(path: str | Path) -> tuple[int, int, ImageFormat]:
    """
    Read width, height and format from the file content.

    Dimensions come from Pillow's header parse, the format from libmagic.
    The file extension is never consulted.

    Raises:
        ImageFileNotFoundError: If the path is not an existing file
        InvalidImageDataError: If no positive width/height can be read
        UnsupportedFormatError: If the image is not JPEG, PNG or GIF
    """
    path = Path(path)
    if not path.is_file():
        raise ImageFileNotFoundError(f"Failed to open {path.name}, file not found")

    try:
        with Image.open(path) as img:
            width, height = img.size
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise InvalidImageDataError(f"File {path.name} does not appear to be an image") from exc

    if width <= 0 or height <= 0:
        raise InvalidImageDataError(f"File {path.name} does not appear to be an image")

    with open(path, "rb") as f:
        bytes_io = BytesIO(f.read(MAGIC_HEADER_BYTES))
    image_format = determine_format(bytes_io)

    if image_format is None:
        raise UnsupportedFormatError(f"Unable to read from {path.name}, unsupported format")

    logger.debug(f"Probed {path.name}: {width}x{height} {image_format}")
    return width, height, image_format


class ImageCodec(ABC):
    """Decode/encode strategy for a single image format."""

    image_format: ImageFormat

    def decode(self, path: str | Path) -> Image.Image:
        """Decode the first frame into memory and release the file."""
        path = Path(path)
        try:
            with Image.open(path, formats=[self.image_format.value]) as img:
                img.load()
                return img.copy()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            raise InvalidImageDataError(
                f"Unable to decode {path.name} as {self.image_format}"
            ) from exc

    @abstractmethod
    def save_kwargs(self, options: EncodeOptions) -> dict[str, object]: ...

    def encode(self, image: Image.Image, options: EncodeOptions) -> bytes:
        if options.format != self.image_format:
            raise UnsupportedFormatError(
                f"Cannot encode {self.image_format} image as {options.format}"
            )

        buffer = BytesIO()
        try:
            image.save(buffer, format=self.image_format.value, **self.save_kwargs(options))
            data = buffer.getvalue()
        except (OSError, ValueError) as exc:
            raise EncodingFailureError(
                f"Unknown error while generating {self.image_format} output"
            ) from exc
        finally:
            buffer.close()

        if not data:
            raise EncodingFailureError(
                f"Unknown error while generating {self.image_format} output"
            )
        return data


class JpegCodec(ImageCodec):
    image_format = ImageFormat.JPEG

    @override
    def save_kwargs(self, options: EncodeOptions) -> dict[str, object]:
        return {"quality": options.quality}


class PngCodec(ImageCodec):
    image_format = ImageFormat.PNG

    @override
    def save_kwargs(self, options: EncodeOptions) -> dict[str, object]:
        return {}


class GifCodec(ImageCodec):
    image_format = ImageFormat.GIF

    @override
    def save_kwargs(self, options: EncodeOptions) -> dict[str, object]:
        return {}


CODECS: dict[ImageFormat, ImageCodec] = {
    codec.image_format: codec for codec in (JpegCodec(), PngCodec(), GifCodec())
}


def get_codec(image_format: ImageFormat) -> ImageCodec:
    try:
        return CODECS[image_format]
    except KeyError:
        raise UnsupportedFormatError(f"No codec registered for {image_format}") from None
