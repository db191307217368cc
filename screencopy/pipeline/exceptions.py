from screencopy.screens.models import ErrorStage


class PipelineError(Exception):
    """Base exception for all pipeline-related errors."""


class StageFailure(PipelineError):
    """Raised when a processing stage fails for one screen."""

    def __init__(self, stage: ErrorStage, message: str) -> None:
        super().__init__(message)
        self.stage = stage


class PipelineBusyError(PipelineError):
    """Raised when an operation conflicts with a run in flight."""
