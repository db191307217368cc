from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    ocr_engine: str = "tesseract"
    ocr_language: str = "eng"
    tesseract_cmd: str = ""

    structuring_provider: str = "gemini"
    structuring_api_key: str = ""
    structuring_model_name: str = "gemini-3-flash-preview"
    structuring_base_url: str = ""
    structuring_timeout_seconds: int = 30
    structuring_temperature: float = 0.0

    input_dir: str = "input"
    output_dir: str = "output"
    export_file_name: str = "Copywriting_Project"
    retry_failed_runs: int = 1
