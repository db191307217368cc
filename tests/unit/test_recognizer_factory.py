import pytest

from screencopy.config.settings import Settings
from screencopy.recognition.factory import RecognizerFactory
from screencopy.recognition.tesseract_adapter import TesseractAdapter


class TestRecognizerFactory:
    def test_creates_tesseract_adapter(self) -> None:
        adapter = RecognizerFactory.create(Settings(ocr_engine="tesseract"))
        assert isinstance(adapter, TesseractAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = RecognizerFactory.create(Settings(ocr_engine="Tesseract"))
        assert isinstance(adapter, TesseractAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown OCR engine"):
            RecognizerFactory.create(Settings(ocr_engine="unknown"))
