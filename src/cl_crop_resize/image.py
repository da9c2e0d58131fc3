"""Load an image once, then produce crop-to-fill resized copies of it."""

from pathlib import Path
from types import TracebackType
from typing import Self

from loguru import logger
from PIL import Image

from .algo.geometry import compute_geometry
from .algo.resample import resample
from .errors import ResizeFailedError
from .image_codecs import get_codec, probe_image
from .schema import EncodeOptions
from .utils.media_types import ImageFormat
from .utils.profiling import timed


class SourceImage:
    """A decoded JPEG, PNG or GIF image.

    The decoded pixels are read-only input to every ``resize`` call; each call
    allocates its own destination image, so results are independent and the
    same instance can be resized any number of times.

    Usage:
        with SourceImage("photo.jpg") as img:
            thumb = img.resize(400, 400, img.encode_options(quality=90))
    """

    _path: Path
    _width: int
    _height: int
    _format: ImageFormat
    _image: Image.Image

    def __init__(self, path: str | Path) -> None:
        path = Path(path)
        self._path = path
        self._width, self._height, self._format = probe_image(path)
        self._image = get_codec(self._format).decode(path)

        logger.debug(f"Loaded {path}: {self._width}x{self._height} {self._format}")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def format(self) -> ImageFormat:
        return self._format

    @property
    def mime_type(self) -> str:
        return self._format.mime_type

    def encode_options(self, quality: float | None = None) -> EncodeOptions:
        """Encoder settings for this image's format.

        Raises:
            InvalidQualitySettingError: If a quality is given for a non-JPEG
                image, or is outside 1-100
        """
        return EncodeOptions.for_format(self._format, quality)

    def resize(
        self,
        width: int | None = None,
        height: int | None = None,
        options: EncodeOptions | None = None,
    ) -> bytes:
        """
        Resize to fill ``width`` x ``height`` and return the encoded bytes.

        If one side is omitted it is derived from the source aspect ratio.
        When the requested box has a different aspect ratio than the source,
        the excess source content is cut away. The output format is always
        the source format.

        Args:
            width: Target width in pixels
            height: Target height in pixels
            options: Encoder settings (default quality 80)

        Returns:
            Encoded image data

        Raises:
            ResizeFailedError: Wrapping whatever went wrong; see ``.cause``
        """
        try:
            return self._resize(width, height, options)
        except Exception as exc:
            raise ResizeFailedError(f"Unable to resize {self._path.name}: {exc}") from exc

    @timed
    def _resize(
        self,
        width: int | None,
        height: int | None,
        options: EncodeOptions | None,
    ) -> bytes:
        if options is None:
            options = self.encode_options()

        geometry = compute_geometry(self._width, self._height, width, height)
        resized = resample(self._image, geometry)
        try:
            data = get_codec(self._format).encode(resized, options)
        finally:
            resized.close()

        dst_width, dst_height = geometry.size
        logger.info(
            f"Resized {self._path.name} {self._width}x{self._height} -> "
            f"{dst_width}x{dst_height} ({len(data)} bytes)"
        )
        return data

    def close(self) -> None:
        self._image.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={str(self._path)!r}, "
            f"size={self._width}x{self._height}, format={self._format})"
        )


def load_image(path: str | Path) -> SourceImage:
    """Load and decode an image file; see ``SourceImage``."""
    return SourceImage(path)
