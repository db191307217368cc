from typing import ClassVar

from screencopy.config.settings import Settings
from screencopy.structuring.base import BaseCopyStructurer
from screencopy.structuring.example_client_adapter import ExampleClientAdapter
from screencopy.structuring.openai_client_adapter import OpenAIClientAdapter
from screencopy.structuring.structurer import CopyStructurer


class StructurerFactory:
    """Creates the configured copy structurer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseCopyStructurer:
        """Create a configured structurer from application settings."""
        provider = settings.structuring_provider.lower()
        if provider == "example":
            return CopyStructurer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        client = OpenAIClientAdapter(
            api_key=settings.structuring_api_key,
            timeout_seconds=settings.structuring_timeout_seconds or 30,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return CopyStructurer(
            client=client,
            model=settings.structuring_model_name,
            temperature=settings.structuring_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.structuring_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "structuring_base_url is required for "
                    "structuring_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown structuring provider '{provider}'. Choose from: {supported}"
        )
