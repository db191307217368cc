from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from screencopy.config.settings import Settings
from screencopy.logging.logger import Log
from screencopy.pipeline.exceptions import StageFailure
from screencopy.pipeline.pipeline import PipelineStep, ScreenContext
from screencopy.pipeline.steps import ReadImageStep, RecognizeTextStep, StructureCopyStep
from screencopy.recognition.factory import RecognizerFactory
from screencopy.screens.image_loader import ImageLoader
from screencopy.screens.models import ScreenRecord, ScreenStatus, ScreenUpdate
from screencopy.screens.store import ScreenStore
from screencopy.structuring.factory import StructurerFactory


class PipelineState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class PipelineProgress:
    """Advisory progress published to pipeline observers."""

    state: PipelineState
    phase_label: str = ""


ProgressListener = Callable[[PipelineProgress], None]


class BatchPipeline:
    """Drives every unfinished screen through its steps, one screen at a time.

    Pipeline: read image -> recognize text -> structure copy.

    Completed screens are never revisited, so a second run over the same
    store only retries the ones that failed. Failures are contained per
    screen and never escape run().

    A run snapshots the store's ids when it starts. Screens removed while it
    is in flight are skipped when their turn comes.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)
        self._state = PipelineState.IDLE
        self._phase_label = ""
        self._listeners: list[ProgressListener] = []

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is PipelineState.RUNNING

    @property
    def phase_label(self) -> str:
        return self._phase_label

    def subscribe(self, listener: ProgressListener) -> Callable[[], None]:
        """Register a progress observer. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def run(self, store: ScreenStore) -> None:
        """Process every pending or failed screen in store order.

        Calling run while another run is in flight does nothing.
        """
        if self.is_running:
            Log.warning("Pipeline run already in flight, ignoring request")
            return

        record_ids = store.ids()
        self._set_progress(PipelineState.RUNNING, "")
        Log.info(f"Pipeline run started for {len(record_ids)} screens")
        try:
            for record_id in record_ids:
                record = store.get(record_id)
                if record is None:
                    Log.info(f"Screen {record_id} removed during run, skipping")
                    continue
                if record.status is ScreenStatus.COMPLETED:
                    continue
                self._process_record(store, record)
        finally:
            self._set_progress(PipelineState.IDLE, "")
            Log.info(
                f"Pipeline run finished: {len(store.completed())}/{len(store)} screens completed"
            )

    def _process_record(self, store: ScreenStore, record: ScreenRecord) -> None:
        try:
            store.apply(ScreenUpdate.processing(record.id))
            context = ScreenContext(record_id=record.id, source=record.source)
            for step in self._steps:
                self._set_phase(f"{step.phase}: {record.file_name}")
                context = self._run_step(step, context)
            if context.structured_copy is None:
                raise ValueError("Pipeline finished without structured copy")
            store.apply(ScreenUpdate.completed(record.id, context.structured_copy))
            Log.info(f"Screen {record.id} completed", file_name=record.file_name)
        except StageFailure as exc:
            Log.error(
                f"Screen {record.id} failed at {exc.stage.value}: {exc}",
                file_name=record.file_name,
            )
            store.apply(ScreenUpdate.failed(record.id, exc.stage))
        except Exception as exc:
            Log.exception(f"Screen {record.id} failed: {exc}", file_name=record.file_name)
            store.apply(ScreenUpdate.failed(record.id))

    @staticmethod
    def _run_step(step: PipelineStep, context: ScreenContext) -> ScreenContext:
        try:
            return step.run(context)
        except StageFailure:
            raise
        except Exception as exc:
            raise StageFailure(step.stage, str(exc) or type(exc).__name__) from exc

    def _set_phase(self, label: str) -> None:
        self._set_progress(self._state, label)

    def _set_progress(self, state: PipelineState, phase_label: str) -> None:
        self._state = state
        self._phase_label = phase_label
        progress = PipelineProgress(state=state, phase_label=phase_label)
        for listener in list(self._listeners):
            try:
                listener(progress)
            except Exception as exc:
                Log.exception(f"Progress listener failed: {exc}")


def build_pipeline(settings: Settings) -> BatchPipeline:
    """Build a BatchPipeline with the configured recognizer and structurer."""
    steps: list[PipelineStep] = [
        ReadImageStep(image_loader=ImageLoader()),
        RecognizeTextStep(recognizer=RecognizerFactory.create(settings)),
        StructureCopyStep(structurer=StructurerFactory.create(settings)),
    ]
    return BatchPipeline(steps)
