"""Tests for output mode selection."""

import json

from ugraph.output.formatters import OutputSettings, format_result
from ugraph.services.result import ServiceResult

_RESULT = ServiceResult(ok=True, op="degree", data={"id": "a", "degree": 2})


class TestFormatResult:
    def test_json(self) -> None:
        out = format_result(_RESULT, settings=OutputSettings(json_output=True))
        assert json.loads(out)["data"]["degree"] == 2

    def test_json_wins_over_quiet(self) -> None:
        out = format_result(_RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(out)["op"] == "degree"

    def test_quiet(self) -> None:
        assert format_result(_RESULT, settings=OutputSettings(quiet=True)) == "2"

    def test_default_is_rich(self) -> None:
        out = format_result(_RESULT)
        assert out.startswith("OK")
        assert "degree: 2" in out
