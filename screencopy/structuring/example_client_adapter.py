"""Offline structuring client.

Echoes the OCR text back as the remark so a batch can be processed end to end
without an API key.
"""

import json

from screencopy.structuring.client_base import BaseStructuringClient
from screencopy.structuring.models import StructuringRequest

_TEXT_MARKER = '"""'
_EMPTY_REMARK = "- (no text)"


class ExampleClientAdapter(BaseStructuringClient):
    """Returns the raw OCR block from the prompt as a Markdown bullet list.

    No network calls. Useful for local development and tests.
    """

    def complete(self, request: StructuringRequest) -> str:
        lines = (line.strip() for line in _extract_ocr_block(request.prompt).splitlines())
        remark = "\n".join(f"- {line}" for line in lines if line)
        return json.dumps({"remark": remark or _EMPTY_REMARK})


def _extract_ocr_block(prompt: str) -> str:
    start = prompt.find(_TEXT_MARKER)
    end = prompt.rfind(_TEXT_MARKER)
    if start == -1 or end <= start:
        return prompt
    return prompt[start + len(_TEXT_MARKER):end]
