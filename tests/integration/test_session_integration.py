import io
from pathlib import Path

import pytest
from openpyxl import load_workbook
from PIL import Image

from screencopy.export.excel_exporter import ExcelExporter
from screencopy.export.exceptions import NoCompletedScreensError
from screencopy.pipeline.batch import BatchPipeline
from screencopy.pipeline.steps import ReadImageStep, RecognizeTextStep, StructureCopyStep
from screencopy.recognition.base import BaseTextRecognizer
from screencopy.recognition.models import RecognitionResult
from screencopy.screens.image_loader import ImageLoader
from screencopy.screens.ingestion import ScreenIngestor
from screencopy.screens.models import ErrorStage, ScreenStatus
from screencopy.screens.store import ScreenStore
from screencopy.session.session import ScreenSession
from screencopy.structuring.example_client_adapter import ExampleClientAdapter
from screencopy.structuring.structurer import CopyStructurer


class SizeKeyedRecognizer(BaseTextRecognizer):
    """Recognizes text by image width, standing in for the OCR engine."""

    def __init__(self, texts_by_width: dict[int, str]) -> None:
        self._texts_by_width = texts_by_width
        self.calls = 0

    def recognize(self, image_bytes: bytes) -> RecognitionResult:
        self.calls += 1
        with Image.open(io.BytesIO(image_bytes)) as image:
            return RecognitionResult(text=self._texts_by_width.get(image.width, ""))


def _write(tmp_path: Path, name: str, width: int, image_format: str = "PNG") -> Path:
    path = tmp_path / name
    mode = "RGB" if image_format == "JPEG" else "RGBA"
    Image.new(mode, (width, 200), color="white").save(path, format=image_format)
    return path


@pytest.fixture()
def session_parts(tmp_path: Path) -> tuple[ScreenSession, SizeKeyedRecognizer]:
    recognizer = SizeKeyedRecognizer({300: "Welcome screen copy", 320: "Sign in"})
    pipeline = BatchPipeline([
        ReadImageStep(ImageLoader()),
        RecognizeTextStep(recognizer),
        StructureCopyStep(CopyStructurer(client=ExampleClientAdapter(), model="example")),
    ])
    session = ScreenSession(
        store=ScreenStore(),
        pipeline=pipeline,
        ingestor=ScreenIngestor(preview_dir=tmp_path / "previews"),
        exporter=ExcelExporter(output_dir=tmp_path / "out"),
    )
    return session, recognizer


@pytest.mark.integration
class TestScreenSessionEndToEnd:
    def test_process_retry_and_export(
        self,
        tmp_path: Path,
        session_parts: tuple[ScreenSession, SizeKeyedRecognizer],
    ) -> None:
        session, recognizer = session_parts
        session.add_files([
            _write(tmp_path, "welcome.png", 300),
            _write(tmp_path, "blank.webp", 310, image_format="WEBP"),
            _write(tmp_path, "login.jpg", 320, image_format="JPEG"),
        ])

        session.process()

        welcome, blank, login = session.store.records
        assert welcome.status is ScreenStatus.COMPLETED
        assert welcome.structured_copy is not None
        assert welcome.structured_copy.remark == "- Welcome screen copy"
        assert blank.status is ScreenStatus.ERROR
        assert blank.error_stage is ErrorStage.RECOGNITION
        assert login.status is ScreenStatus.COMPLETED
        stats = session.stats
        assert (stats.success, stats.error, stats.is_finished) == (2, 1, True)

        recognizer.calls = 0
        assert session.retry_failed() == 1
        assert recognizer.calls == 1

        path = session.export("Sprint_12")
        worksheet = load_workbook(path).active
        assert worksheet.max_row == 3
        assert worksheet["A2"].value == "- Welcome screen copy"
        assert worksheet["A3"].value == "- Sign in"

    def test_remove_and_reset_release_previews(
        self,
        tmp_path: Path,
        session_parts: tuple[ScreenSession, SizeKeyedRecognizer],
    ) -> None:
        session, _ = session_parts
        first, second = session.add_files([
            _write(tmp_path, "a.png", 300),
            _write(tmp_path, "b.png", 320),
        ])
        assert first.preview is not None and second.preview is not None

        session.remove(first.id)
        assert not first.preview.path.exists()
        assert [r.id for r in session.store] == [second.id]

        session.reset_all()
        assert not second.preview.path.exists()
        assert len(session.store) == 0

    def test_export_refused_when_nothing_completed(
        self,
        tmp_path: Path,
        session_parts: tuple[ScreenSession, SizeKeyedRecognizer],
    ) -> None:
        session, _ = session_parts
        session.add_files([_write(tmp_path, "blank.png", 999)])
        session.process()

        with pytest.raises(NoCompletedScreensError):
            session.export("nothing")
