"""Test configuration and fixtures for cl_crop_resize.

This module provides:
- Synthetic image factories (JPEG, PNG, GIF, BMP) written to tmp_path
- Non-image files for negative tests
- A loguru sink capturing log messages
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

ImageFactory = Callable[..., Path]


# ============================================================================
# Helpers
# ============================================================================


def draw_test_pattern(width: int, height: int, mode: str = "RGB") -> Image.Image:
    """Grid plus a centred ellipse, so crops and scales change the pixels."""
    img = Image.new("RGB", (width, height), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    step = max(1, min(width, height) // 12)
    for i in range(0, width, step):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, step):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)

    draw.ellipse(
        [width * 3 // 8, height // 3, width * 5 // 8, height * 2 // 3],
        fill=(200, 100, 100),
    )

    if mode != "RGB":
        img = img.convert(mode)
    return img


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing a synthetic image and returning its path.

    Args (of the returned callable):
        pil_format: Pillow format name ("JPEG", "PNG", "GIF", "BMP")
        size: (width, height), default 800x600
        name: File name; default derives from the format, so a test can
              pass a misleading extension
        mode: Pillow mode of the saved image
    """

    def _make(
        pil_format: str = "JPEG",
        size: tuple[int, int] = (800, 600),
        name: str | None = None,
        mode: str = "RGB",
        **save_kwargs: object,
    ) -> Path:
        width, height = size
        output_path = tmp_path / (name or f"synthetic_{width}x{height}.{pil_format.lower()}")
        img = draw_test_pattern(width, height, mode)
        img.save(output_path, pil_format, **save_kwargs)
        return output_path

    return _make


@pytest.fixture
def synthetic_jpeg(make_image: ImageFactory) -> Path:
    return make_image("JPEG", (800, 600), quality=85)


@pytest.fixture
def synthetic_png(make_image: ImageFactory) -> Path:
    return make_image("PNG", (800, 600))


@pytest.fixture
def synthetic_gif(make_image: ImageFactory) -> Path:
    return make_image("GIF", (800, 600))


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A well-formed file that is not an image."""
    path = tmp_path / "notes.txt"
    _ = path.write_text("This is a plain text file.\n" * 20, encoding="utf-8")
    return path


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages (DEBUG and up) emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
