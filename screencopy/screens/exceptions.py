class ScreenError(Exception):
    """Base exception for all screen-related errors."""


class ImageReadError(ScreenError):
    """Raised when a screen's source image cannot be read from disk."""


class UnsupportedImageError(ScreenError):
    """Raised when a file cannot be decoded as an image at ingestion."""
