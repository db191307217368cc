from abc import ABC, abstractmethod

from screencopy.recognition.models import RecognitionResult


class BaseTextRecognizer(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> RecognitionResult:
        """Extract raw text from encoded image bytes.

        Args:
            image_bytes: Encoded image content (PNG, JPEG, WebP, ...).

        Returns:
            RecognitionResult with the text as produced by the engine.
            The text may be empty; callers decide whether that is usable.

        Raises:
            RecognitionError: if the image cannot be decoded or the engine fails.
        """
