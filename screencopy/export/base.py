from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from screencopy.screens.models import ScreenRecord


class BaseScreenExporter(ABC):
    """Contract for document exporters of completed screens."""

    @abstractmethod
    def export(self, screens: Sequence[ScreenRecord], file_name: str) -> Path:
        """Write completed screens into a downloadable document.

        Args:
            screens: Records in display order; only completed ones are exported.
            file_name: Target name without extension.

        Returns:
            Path of the written document.

        Raises:
            NoCompletedScreensError: if no screen has completed.
        """
