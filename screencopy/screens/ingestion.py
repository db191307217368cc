"""Turns selected image files into pending screen records."""

import mimetypes
import shutil
import tempfile
import uuid
from collections.abc import Iterable
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from screencopy.logging.logger import Log
from screencopy.screens.exceptions import UnsupportedImageError
from screencopy.screens.models import Dimensions, PreviewHandle, ScreenRecord, SourceImage

SUPPORTED_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".webp", ".gif", ".bmp", ".tif", ".tiff"})

_FORMAT_MIME_TYPES = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "WEBP": "image/webp",
    "GIF": "image/gif",
    "BMP": "image/bmp",
    "TIFF": "image/tiff",
}

_UNREADABLE_IMAGE_ERRORS = (OSError, UnidentifiedImageError, Image.DecompressionBombError, ValueError)


class ScreenIngestor:
    """Creates one pending ScreenRecord per image file, in the given order.

    Thumbnails for previews are written into a private temp directory that
    lives as long as the ingestor; call close() to remove it.
    """

    PREVIEW_SIZE = (320, 320)

    def __init__(self, preview_dir: Path | None = None) -> None:
        self._owns_preview_dir = preview_dir is None
        self._preview_dir = (
            Path(tempfile.mkdtemp(prefix="screencopy-previews-"))
            if preview_dir is None
            else preview_dir
        )
        self._preview_dir.mkdir(parents=True, exist_ok=True)

    @property
    def preview_dir(self) -> Path:
        return self._preview_dir

    def ingest(self, paths: Iterable[Path]) -> list[ScreenRecord]:
        """Build records for every readable image; undecodable files are skipped."""
        records: list[ScreenRecord] = []
        for path in paths:
            try:
                records.append(self.ingest_one(Path(path)))
            except UnsupportedImageError as exc:
                Log.warning(f"Skipping file: {exc}")
        Log.info(f"Ingested {len(records)} screens")
        return records

    def ingest_one(self, path: Path) -> ScreenRecord:
        """Read dimensions and build a preview for a single image file.

        Raises:
            UnsupportedImageError: if the file cannot be opened as an image.
        """
        record_id = str(uuid.uuid4())
        try:
            with Image.open(path) as image:
                image_format = image.format or ""
                width, height = image.size
                preview = self._write_preview(image, record_id)
        except _UNREADABLE_IMAGE_ERRORS as exc:
            raise UnsupportedImageError(f"{path.name} is not a readable image: {exc}") from exc

        source = SourceImage(
            path=path,
            file_name=path.name,
            mime_type=_guess_mime_type(path, image_format),
        )
        return ScreenRecord(
            id=record_id,
            source=source,
            dimensions=Dimensions(width=width, height=height),
            preview=preview,
        )

    def close(self) -> None:
        """Remove the preview directory if this ingestor created it."""
        if self._owns_preview_dir:
            shutil.rmtree(self._preview_dir, ignore_errors=True)

    def _write_preview(self, image: Image.Image, record_id: str) -> PreviewHandle:
        thumbnail = ImageOps.exif_transpose(image).convert("RGBA")
        thumbnail.thumbnail(self.PREVIEW_SIZE)
        preview_path = self._preview_dir / f"{record_id}.png"
        thumbnail.save(preview_path, format="PNG")
        return PreviewHandle(preview_path)


def _guess_mime_type(path: Path, image_format: str) -> str:
    mime_type = _FORMAT_MIME_TYPES.get(image_format.upper())
    if mime_type is not None:
        return mime_type
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "application/octet-stream"


def list_image_files(directory: Path) -> list[Path]:
    """Image files directly inside a directory, sorted by name."""
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in SUPPORTED_EXTENSIONS
    )
