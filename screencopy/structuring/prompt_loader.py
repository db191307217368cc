from pathlib import Path

from screencopy.structuring.exceptions import StructuringError

PROMPT_DIR = Path(__file__).parent / "prompts"
PROMPT_TEMPLATE_FILE = "structuring_prompt.txt"
JSON_SCHEMA_FILE = "structuring_schema.json"


def load_prompt_template(path: Path | None = None) -> str:
    """Read the prompt template. It carries {ocr_text} and {json_schema} placeholders.

    Raises:
        StructuringError: if the file cannot be read.
    """
    return _read_bundled(path or PROMPT_DIR / PROMPT_TEMPLATE_FILE, "prompt template")


def load_json_schema(path: Path | None = None) -> str:
    """Read the response schema text, by default the bundled one."""
    return _read_bundled(path or PROMPT_DIR / JSON_SCHEMA_FILE, "JSON schema")


def _read_bundled(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StructuringError(f"Failed to load {label}: {exc}") from exc
