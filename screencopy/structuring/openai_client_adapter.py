import httpx
import openai

from screencopy.logging.logger import Log
from screencopy.structuring.client_base import BaseStructuringClient
from screencopy.structuring.exceptions import StructuringError, StructuringNetworkError
from screencopy.structuring.models import StructuringRequest

_TRANSPORT_ERRORS = (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException)


class OpenAIClientAdapter(BaseStructuringClient):
    """Chat-completions client for OpenAI and any provider exposing the same API.

    The reply is constrained with a strict json_schema response format.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def complete(self, request: StructuringRequest) -> str:
        Log.debug(f"Requesting structured copy from {request.model}")
        try:
            response = self._client.chat.completions.create(
                model=request.model,
                temperature=request.temperature,
                messages=_messages(request),
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": request.schema_name,
                        "strict": True,
                        "schema": request.json_schema,
                    },
                },
            )
        except _TRANSPORT_ERRORS as exc:
            raise StructuringNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise StructuringNetworkError(f"AI provider API error: {exc}") from exc
        return _reply_text(response)


def _messages(request: StructuringRequest) -> list[dict[str, str]]:
    messages = []
    if request.system_prompt:
        messages.append({"role": "system", "content": request.system_prompt})
    messages.append({"role": "user", "content": request.prompt})
    return messages


def _reply_text(response) -> str:
    if not response.choices:
        raise StructuringError("AI returned no choices")
    content = response.choices[0].message.content
    if content is None:
        raise StructuringError("AI returned empty response")
    return content
