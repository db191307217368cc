import io

import pytesseract
from PIL import Image, ImageOps

from screencopy.recognition.base import BaseTextRecognizer
from screencopy.recognition.exceptions import RecognitionError
from screencopy.recognition.models import RecognitionResult


class TesseractAdapter(BaseTextRecognizer):
    """Recognizes text locally using the Tesseract engine."""

    def __init__(self, language: str = "eng", tesseract_cmd: str = "") -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_bytes: bytes) -> RecognitionResult:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                prepared = ImageOps.exif_transpose(image).convert("RGB")
            text = pytesseract.image_to_string(prepared, lang=self._language)
        except Exception as exc:
            raise RecognitionError(f"tesseract recognition failed: {exc}") from exc
        return RecognitionResult(text=text)
