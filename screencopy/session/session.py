from collections.abc import Iterable
from pathlib import Path

from screencopy.config.settings import Settings
from screencopy.export.base import BaseScreenExporter
from screencopy.export.excel_exporter import ExcelExporter
from screencopy.logging.logger import Log
from screencopy.pipeline.batch import BatchPipeline, build_pipeline
from screencopy.pipeline.exceptions import PipelineBusyError
from screencopy.pipeline.stats import BatchStats, compute_stats
from screencopy.screens.ingestion import ScreenIngestor
from screencopy.screens.models import ScreenRecord, ScreenStatus
from screencopy.screens.store import ScreenStore


class ScreenSession:
    """Single-user working session: the batch, its pipeline and its export.

    This is the surface a front end drives: add files, remove or reset,
    process, retry the failures and download the workbook.
    """

    def __init__(
        self,
        store: ScreenStore,
        pipeline: BatchPipeline,
        ingestor: ScreenIngestor,
        exporter: BaseScreenExporter,
    ) -> None:
        self._store = store
        self._pipeline = pipeline
        self._ingestor = ingestor
        self._exporter = exporter
        self._has_started_processing = False

    @property
    def store(self) -> ScreenStore:
        return self._store

    @property
    def pipeline(self) -> BatchPipeline:
        return self._pipeline

    @property
    def has_started_processing(self) -> bool:
        return self._has_started_processing

    @property
    def stats(self) -> BatchStats:
        return compute_stats(self._store, self._pipeline.is_running)

    def add_files(self, paths: Iterable[Path]) -> list[ScreenRecord]:
        records = self._ingestor.ingest(paths)
        self._store.add(records)
        return records

    def remove(self, record_id: str) -> bool:
        return self._store.remove(record_id)

    def reset_all(self) -> None:
        """Release every preview and empty the batch.

        Raises:
            PipelineBusyError: if a run is in flight.
        """
        if self._pipeline.is_running:
            raise PipelineBusyError("Cannot reset while screens are being processed")
        self._store.clear()
        self._has_started_processing = False
        Log.info("Session reset")

    def process(self) -> None:
        """Run the pipeline over every screen that has not completed yet."""
        if len(self._store) == 0:
            Log.info("Nothing to process")
            return
        self._has_started_processing = True
        self._pipeline.run(self._store)

    def retry_failed(self) -> int:
        """Re-run only the failed screens. Returns how many were retried."""
        failed = sum(1 for r in self._store if r.status is ScreenStatus.ERROR)
        if failed == 0:
            return 0
        Log.info(f"Retrying {failed} failed screens")
        self.process()
        return failed

    def export(self, file_name: str) -> Path:
        """Write completed screens to a workbook and return its path.

        Raises:
            NoCompletedScreensError: if no screen has completed.
        """
        return self._exporter.export(self._store.completed(), file_name)

    def close(self) -> None:
        """Release previews and the ingestor's temp directory."""
        if not self._pipeline.is_running:
            self._store.clear()
        self._ingestor.close()


def build_session(settings: Settings) -> ScreenSession:
    """Build a ScreenSession with all required adapters."""
    return ScreenSession(
        store=ScreenStore(),
        pipeline=build_pipeline(settings),
        ingestor=ScreenIngestor(),
        exporter=ExcelExporter(output_dir=Path(settings.output_dir)),
    )
