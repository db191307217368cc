from dataclasses import dataclass


@dataclass(frozen=True)
class StructuredCopy:
    """Cleaned, restructured copywriting for one screen."""

    remark: str


@dataclass(frozen=True)
class StructuringRequest:
    """One schema-constrained completion request sent to a structuring client."""

    model: str
    prompt: str
    json_schema: dict[str, object]
    temperature: float = 0.0
    system_prompt: str = ""
    schema_name: str = "structured_copy"
