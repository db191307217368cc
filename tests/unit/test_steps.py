from pathlib import Path
from unittest.mock import MagicMock

import pytest

from screencopy.pipeline.pipeline import ScreenContext
from screencopy.pipeline.steps import ReadImageStep, RecognizeTextStep, StructureCopyStep
from screencopy.recognition.exceptions import EmptyRecognitionError
from screencopy.recognition.models import RecognitionResult
from screencopy.screens.image_loader import ImageLoader
from screencopy.screens.models import ErrorStage, SourceImage
from screencopy.structuring.models import StructuredCopy


def _context(path: Path = Path("/screens/home.png")) -> ScreenContext:
    return ScreenContext(
        record_id="s1",
        source=SourceImage(path=path, file_name=path.name, mime_type="image/png"),
    )


class TestReadImageStep:
    def test_loads_bytes_into_context(self) -> None:
        loader = MagicMock(spec=ImageLoader)
        loader.load.return_value = b"\x89PNG"
        context = _context()

        ReadImageStep(loader).run(context)

        loader.load.assert_called_once_with(context.source)
        assert context.image_bytes == b"\x89PNG"

    def test_counts_as_recognition_stage(self) -> None:
        assert ReadImageStep.stage is ErrorStage.RECOGNITION


class TestRecognizeTextStep:
    def test_stores_raw_text(self) -> None:
        recognizer = MagicMock()
        recognizer.recognize.return_value = RecognitionResult(text="Welcome back")
        context = _context()
        context.image_bytes = b"img"

        RecognizeTextStep(recognizer).run(context)

        recognizer.recognize.assert_called_once_with(b"img")
        assert context.raw_text == "Welcome back"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\x0c"])
    def test_blank_text_raises(self, text: str) -> None:
        recognizer = MagicMock()
        recognizer.recognize.return_value = RecognitionResult(text=text)
        context = _context()
        context.image_bytes = b"img"

        with pytest.raises(EmptyRecognitionError, match="No text found"):
            RecognizeTextStep(recognizer).run(context)

    def test_requires_image_bytes(self) -> None:
        with pytest.raises(ValueError, match="image_bytes"):
            RecognizeTextStep(MagicMock()).run(_context())


class TestStructureCopyStep:
    def test_stores_structured_copy(self) -> None:
        structurer = MagicMock()
        structurer.structure.return_value = StructuredCopy(remark="# Home")
        context = _context()
        context.raw_text = "Home"

        StructureCopyStep(structurer).run(context)

        structurer.structure.assert_called_once_with("Home")
        assert context.structured_copy == StructuredCopy(remark="# Home")

    def test_requires_raw_text(self) -> None:
        with pytest.raises(ValueError, match="raw_text"):
            StructureCopyStep(MagicMock()).run(_context())

    def test_counts_as_structuring_stage(self) -> None:
        assert StructureCopyStep.stage is ErrorStage.STRUCTURING
