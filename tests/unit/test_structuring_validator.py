import pytest

from screencopy.structuring.exceptions import StructuringValidationError
from screencopy.structuring.models import StructuredCopy
from screencopy.structuring.validator import validate_and_build


class TestValidateAndBuild:
    def test_builds_structured_copy(self) -> None:
        assert validate_and_build({"remark": "# Home\n- Sign in"}) == StructuredCopy(
            remark="# Home\n- Sign in"
        )

    def test_strips_surrounding_whitespace(self) -> None:
        assert validate_and_build({"remark": "\n  # Home \n"}).remark == "# Home"

    def test_ignores_extra_fields(self) -> None:
        assert validate_and_build({"remark": "ok", "notes": "x"}).remark == "ok"

    def test_missing_remark_raises(self) -> None:
        with pytest.raises(StructuringValidationError, match="Missing required field"):
            validate_and_build({})

    @pytest.mark.parametrize("value", [None, 42, ["a"], {"text": "a"}])
    def test_non_string_remark_raises(self, value: object) -> None:
        with pytest.raises(StructuringValidationError, match="must be a string"):
            validate_and_build({"remark": value})

    def test_blank_remark_raises(self) -> None:
        with pytest.raises(StructuringValidationError, match="blank"):
            validate_and_build({"remark": "   "})
