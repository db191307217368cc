from abc import ABC, abstractmethod

from screencopy.structuring.models import StructuredCopy


class BaseCopyStructurer(ABC):
    """Contract for all copy structuring adapters."""

    @abstractmethod
    def structure(self, raw_text: str) -> StructuredCopy:
        """Turn raw OCR text into cleaned, organized UI copy.

        Args:
            raw_text: Text as produced by the recognizer.

        Returns:
            StructuredCopy with the Markdown-formatted remark.

        Raises:
            StructuringError: on any failure.
        """
