from screencopy.screens.exceptions import ImageReadError
from screencopy.screens.models import SourceImage


class ImageLoader:
    """Reads a screen's source image into bytes for recognition."""

    def load(self, source: SourceImage) -> bytes:
        """Read image bytes from disk.

        Raises:
            ImageReadError: if the file is missing, unreadable or empty.
        """
        if not source.path.exists():
            raise ImageReadError(f"File not found: {source.path}")
        try:
            data = source.path.read_bytes()
        except OSError as exc:
            raise ImageReadError(f"Failed to read {source.path}: {exc}") from exc
        if not data:
            raise ImageReadError(f"File is empty: {source.path}")
        return data
