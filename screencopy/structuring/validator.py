"""Validates the parsed AI response and builds StructuredCopy."""

from typing import Any

from screencopy.structuring.exceptions import StructuringValidationError
from screencopy.structuring.models import StructuredCopy


def validate_and_build(data: dict[str, Any]) -> StructuredCopy:
    """Build StructuredCopy from a parsed response object.

    Raises:
        StructuringValidationError: if 'remark' is missing, not a string, or blank.
    """
    if "remark" not in data:
        raise StructuringValidationError("Missing required field: remark")
    remark = data["remark"]
    if not isinstance(remark, str):
        raise StructuringValidationError("'remark' must be a string")
    if not remark.strip():
        raise StructuringValidationError("'remark' must not be blank")
    return StructuredCopy(remark=remark.strip())
