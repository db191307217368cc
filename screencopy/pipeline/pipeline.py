from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from screencopy.screens.models import ErrorStage, SourceImage
from screencopy.structuring.models import StructuredCopy


@dataclass(slots=True)
class ScreenContext:
    """Accumulates data as one screen moves through the processing steps."""

    record_id: str
    source: SourceImage
    image_bytes: bytes = b""
    raw_text: str = ""
    structured_copy: StructuredCopy | None = None


class PipelineStep(ABC):
    stage: ClassVar[ErrorStage]
    phase: ClassVar[str]

    @abstractmethod
    def run(self, context: ScreenContext) -> ScreenContext:
        raise NotImplementedError
