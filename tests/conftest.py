from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from screencopy.screens.models import Dimensions, ScreenRecord, ScreenStatus, SourceImage
from screencopy.structuring.models import StructuredCopy

ImageWriter = Callable[..., Path]
RecordFactory = Callable[..., ScreenRecord]


@pytest.fixture()
def write_image(tmp_path: Path) -> ImageWriter:
    """Write a solid-color image into tmp_path and return its path."""

    def _write(
        name: str = "screen.png",
        size: tuple[int, int] = (120, 80),
        image_format: str = "PNG",
    ) -> Path:
        path = tmp_path / name
        mode = "RGB" if image_format == "JPEG" else "RGBA"
        Image.new(mode, size, color="white").save(path, format=image_format)
        return path

    return _write


@pytest.fixture()
def make_record(write_image: ImageWriter) -> RecordFactory:
    """Build a ScreenRecord backed by a real image file."""
    counter = iter(range(1, 10_000))

    def _make(
        record_id: str | None = None,
        status: ScreenStatus = ScreenStatus.PENDING,
        remark: str | None = None,
        size: tuple[int, int] = (120, 80),
        path: Path | None = None,
    ) -> ScreenRecord:
        index = next(counter)
        if path is None:
            path = write_image(f"screen-{index}.png", size=size)
        return ScreenRecord(
            id=record_id or f"screen-{index}",
            source=SourceImage(path=path, file_name=path.name, mime_type="image/png"),
            dimensions=Dimensions(width=size[0], height=size[1]),
            status=status,
            structured_copy=StructuredCopy(remark=remark) if remark is not None else None,
        )

    return _make


@pytest.fixture()
def png_path(write_image: ImageWriter) -> Path:
    return write_image("welcome.png")


@pytest.fixture()
def jpeg_path(write_image: ImageWriter) -> Path:
    return write_image("login.jpg", image_format="JPEG")


@pytest.fixture()
def webp_path(write_image: ImageWriter) -> Path:
    return write_image("settings.webp", image_format="WEBP")
