"""Pydantic models for resize requests, crop geometry and encode options."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidQualitySettingError
from .utils.media_types import ImageFormat

DEFAULT_QUALITY = 80
MIN_QUALITY = 1
MAX_QUALITY = 100


# ─────────────────────────────────────────────────────────────
# Resize request
# ─────────────────────────────────────────────────────────────


class ResizeRequest(BaseModel):
    """Target box for a resize; either side may be left for derivation."""

    width: float | None = Field(default=None, gt=0, description="Target width in pixels")
    height: float | None = Field(default=None, gt=0, description="Target height in pixels")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    def resolve(self, aspect: float) -> tuple[float, float]:
        """Return ``(width, height)``, deriving a missing side from ``aspect``."""
        if self.width is None:
            if self.height is None:
                raise ValueError("ResizeRequest needs a width or a height")
            return self.height * aspect, self.height
        if self.height is None:
            return self.width, self.width / aspect
        return self.width, self.height


# ─────────────────────────────────────────────────────────────
# Geometry
# ─────────────────────────────────────────────────────────────


class CropRectangle(BaseModel):
    """Real-valued source region; ``x``/``y`` may fall outside the source."""

    x: float = 0.0
    y: float = 0.0
    w: float = Field(..., gt=0)
    h: float = Field(..., gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def box(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.x + self.w, self.y + self.h)

    def within(self, width: int, height: int) -> bool:
        left, top, right, bottom = self.box
        return left >= 0 and top >= 0 and right <= width and bottom <= height


class ResizeGeometry(BaseModel):
    crop: CropRectangle
    width: float = Field(..., gt=0, description="Destination width before truncation")
    height: float = Field(..., gt=0, description="Destination height before truncation")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def size(self) -> tuple[int, int]:
        """Destination buffer size, truncated to whole pixels at allocation time."""
        return (max(1, int(self.width)), max(1, int(self.height)))


# ─────────────────────────────────────────────────────────────
# Encode options
# ─────────────────────────────────────────────────────────────


class EncodeOptions(BaseModel):
    """Immutable per-call encoder settings.

    ``quality`` only has meaning for lossy formats (JPEG). Use
    ``EncodeOptions.for_format`` to build one with validation that raises
    ``InvalidQualitySettingError`` rather than a pydantic error.
    """

    format: ImageFormat
    quality: int = Field(
        default=DEFAULT_QUALITY,
        ge=MIN_QUALITY,
        le=MAX_QUALITY,
        description="JPEG quality (1-100)",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @field_validator("quality", mode="before")
    @classmethod
    def truncate_quality(cls, v: object) -> object:
        if isinstance(v, float):
            return int(v)
        return v

    @classmethod
    def for_format(cls, format: ImageFormat, quality: float | None = None) -> "EncodeOptions":
        if quality is None:
            return cls(format=format)

        if not format.lossy:
            raise InvalidQualitySettingError(
                f"Unable to set quality for non-JPEG image (format: {format})"
            )

        try:
            return cls(format=format, quality=quality)
        except ValidationError as exc:
            raise InvalidQualitySettingError(
                f"Quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {quality}"
            ) from exc
