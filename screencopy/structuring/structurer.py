"""AI-powered cleanup of raw OCR text into structured UI copy."""

import json
from pathlib import Path

from screencopy.logging.logger import Log
from screencopy.structuring.base import BaseCopyStructurer
from screencopy.structuring.client_base import BaseStructuringClient
from screencopy.structuring.exceptions import StructuringError
from screencopy.structuring.models import StructuredCopy, StructuringRequest
from screencopy.structuring.prompt_loader import load_json_schema, load_prompt_template
from screencopy.structuring.validator import validate_and_build

MAX_TEMPERATURE = 0.2
_FENCE = "```"


class CopyStructurer(BaseCopyStructurer):
    """Restructures OCR text into Markdown copy using an AI provider.

    The prompt template and response schema are read once at construction;
    a broken bundle fails fast instead of failing every screen.
    """

    def __init__(
        self,
        *,
        client: BaseStructuringClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(MAX_TEMPERATURE, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._schema_text = load_json_schema(json_schema_path)
        try:
            self._schema = json.loads(self._schema_text)
        except json.JSONDecodeError as exc:
            raise StructuringError(f"Invalid JSON schema: {exc}") from exc

    def structure(self, raw_text: str) -> StructuredCopy:
        request = self.build_request(raw_text)
        Log.debug(f"Structuring prompt:\n{request.prompt}")

        reply = self._client.complete(request)
        Log.debug(f"AI raw response:\n{reply}")

        result = validate_and_build(_parse_reply(reply))
        Log.info(f"Structuring complete: {len(result.remark)} chars of copy")
        return result

    def build_request(self, raw_text: str) -> StructuringRequest:
        prompt = self._prompt_template.format(ocr_text=raw_text, json_schema=self._schema_text)
        return StructuringRequest(
            model=self._model,
            prompt=prompt,
            json_schema=self._schema,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
        )


def _strip_fences(text: str) -> str:
    lines = text.strip().splitlines()
    if lines and lines[0].startswith(_FENCE):
        lines = lines[1:]
    if lines and lines[-1].strip() == _FENCE:
        lines = lines[:-1]
    return "\n".join(lines)


def _parse_reply(reply: str) -> dict[str, object]:
    try:
        parsed = json.loads(_strip_fences(reply))
    except json.JSONDecodeError as exc:
        raise StructuringError(f"Invalid JSON response: {exc}") from exc
    if not isinstance(parsed, dict):
        raise StructuringError("JSON response must be an object")
    return parsed
