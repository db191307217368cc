from screencopy.logging.logger import Log
from screencopy.pipeline.pipeline import PipelineStep, ScreenContext
from screencopy.recognition.base import BaseTextRecognizer
from screencopy.recognition.exceptions import EmptyRecognitionError
from screencopy.screens.image_loader import ImageLoader
from screencopy.screens.models import ErrorStage
from screencopy.structuring.base import BaseCopyStructurer


class ReadImageStep(PipelineStep):
    stage = ErrorStage.RECOGNITION
    phase = "Reading"

    def __init__(self, image_loader: ImageLoader) -> None:
        self._image_loader = image_loader

    def run(self, context: ScreenContext) -> ScreenContext:
        context.image_bytes = self._image_loader.load(context.source)
        Log.debug(f"Read {len(context.image_bytes)} bytes for screen {context.record_id}")
        return context


class RecognizeTextStep(PipelineStep):
    stage = ErrorStage.RECOGNITION
    phase = "OCR Scanning"

    def __init__(self, recognizer: BaseTextRecognizer) -> None:
        self._recognizer = recognizer

    def run(self, context: ScreenContext) -> ScreenContext:
        if not context.image_bytes:
            raise ValueError("ScreenContext.image_bytes must be set before recognition")
        result = self._recognizer.recognize(context.image_bytes)
        if result.is_blank:
            raise EmptyRecognitionError("No text found")
        context.raw_text = result.text
        Log.info(f"Recognized {len(result.text)} chars on screen {context.record_id}")
        return context


class StructureCopyStep(PipelineStep):
    stage = ErrorStage.STRUCTURING
    phase = "AI Structuring"

    def __init__(self, structurer: BaseCopyStructurer) -> None:
        self._structurer = structurer

    def run(self, context: ScreenContext) -> ScreenContext:
        if not context.raw_text:
            raise ValueError("ScreenContext.raw_text must be set before structuring")
        context.structured_copy = self._structurer.structure(context.raw_text)
        return context
