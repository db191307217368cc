class ExportError(Exception):
    """Base exception for all export-related errors."""


class NoCompletedScreensError(ExportError):
    """Raised when an export is requested but no screen has completed."""
