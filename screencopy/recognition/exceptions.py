class RecognitionError(Exception):
    """Raised when text recognition fails."""


class EmptyRecognitionError(RecognitionError):
    """Raised when recognition succeeds but yields no usable text."""
