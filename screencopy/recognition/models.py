from dataclasses import dataclass


@dataclass(frozen=True)
class RecognitionResult:
    """Raw text recognized in one image."""

    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()
