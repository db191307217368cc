class StructuringError(Exception):
    """Raised when copy structuring fails."""


class StructuringValidationError(StructuringError):
    """Raised when the AI response does not match the expected shape."""


class StructuringNetworkError(StructuringError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
