from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from screencopy.structuring.models import StructuredCopy


class ScreenStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class ErrorStage(str, Enum):
    RECOGNITION = "recognition"
    STRUCTURING = "structuring"


@dataclass(frozen=True)
class Dimensions:
    """Pixel size captured once at ingestion."""

    width: int
    height: int


@dataclass(frozen=True)
class SourceImage:
    """Reference to the original image file uploaded for a screen."""

    path: Path
    file_name: str
    mime_type: str


class PreviewHandle:
    """Transient thumbnail file derived from a source image.

    The file lives in a session temp directory and must be released when its
    record is removed or the batch is cleared.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._released = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Delete the thumbnail file. Safe to call more than once."""
        if self._released:
            return
        self._path.unlink(missing_ok=True)
        self._released = True


@dataclass
class ScreenRecord:
    """One uploaded image plus its processing status and results.

    Only ScreenStore.apply mutates status, error_stage and structured_copy.
    """

    id: str
    source: SourceImage
    dimensions: Dimensions | None = None
    preview: PreviewHandle | None = None
    status: ScreenStatus = ScreenStatus.PENDING
    error_stage: ErrorStage | None = None
    structured_copy: StructuredCopy | None = None

    @property
    def file_name(self) -> str:
        return self.source.file_name

    @property
    def is_settled(self) -> bool:
        return self.status in (ScreenStatus.COMPLETED, ScreenStatus.ERROR)


@dataclass(frozen=True)
class ScreenUpdate:
    """A single state transition for one record, applied atomically by the store."""

    record_id: str
    status: ScreenStatus
    error_stage: ErrorStage | None = None
    structured_copy: StructuredCopy | None = None

    def __post_init__(self) -> None:
        if (self.error_stage is not None) and self.status is not ScreenStatus.ERROR:
            raise ValueError("error_stage is only allowed with status 'error'")
        if (self.structured_copy is not None) != (self.status is ScreenStatus.COMPLETED):
            raise ValueError("structured_copy must be set exactly when status is 'completed'")

    @classmethod
    def processing(cls, record_id: str) -> "ScreenUpdate":
        return cls(record_id=record_id, status=ScreenStatus.PROCESSING)

    @classmethod
    def completed(cls, record_id: str, structured_copy: StructuredCopy) -> "ScreenUpdate":
        return cls(
            record_id=record_id,
            status=ScreenStatus.COMPLETED,
            structured_copy=structured_copy,
        )

    @classmethod
    def failed(cls, record_id: str, stage: ErrorStage | None = None) -> "ScreenUpdate":
        return cls(record_id=record_id, status=ScreenStatus.ERROR, error_stage=stage)
