from collections.abc import Callable

from screencopy.config.settings import Settings
from screencopy.recognition.base import BaseTextRecognizer
from screencopy.recognition.tesseract_adapter import TesseractAdapter


class RecognizerFactory:
    """Creates the configured OCR adapter based on settings."""

    ADAPTERS: dict[str, Callable[[Settings], BaseTextRecognizer]] = {
        "tesseract": lambda s: TesseractAdapter(
            language=s.ocr_language,
            tesseract_cmd=s.tesseract_cmd,
        ),
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextRecognizer:
        engine = settings.ocr_engine.lower()
        builder = cls.ADAPTERS.get(engine)
        if builder is None:
            raise ValueError(
                f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return builder(settings)
