"""Tests for the format_result dispatcher and OutputSettings."""

import json

from flatkit.output.formatters import OutputSettings, format_result
from flatkit.services.result import ErrorCode, ServiceError, ServiceResult


def _ok(op: str = "flatten", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data), meta={"duration_ms": 1.5})


def _err(op: str = "flatten", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=ErrorCode.INVALID_JSON, message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.indent == 2


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok(result=[1, 2]), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "flatten"
        assert data["data"]["result"] == [1, 2]

    def test_json_mode_error(self) -> None:
        output = format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_output_kwarg(self) -> None:
        data = json.loads(format_result(_ok(result=[]), json_output=True))
        assert data["ok"] is True

    def test_zero_indent_is_single_line(self) -> None:
        output = format_result(_ok(result=[1]), settings=OutputSettings(json_output=True, indent=0))
        assert "\n" not in output

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(_ok(result=[1]), settings=OutputSettings(), json_output=True)
        assert output.startswith("{") is False


class TestFormatResultQuiet:
    def test_quiet_prints_result_payload(self) -> None:
        output = format_result(_ok(result=[1, [2]], depth=1), settings=OutputSettings(quiet=True))
        assert output == "[1,[2]]"

    def test_quiet_without_result_payload(self) -> None:
        output = format_result(_ok("inspect", length=2), settings=OutputSettings(quiet=True))
        assert output == "OK: inspect"

    def test_quiet_error(self) -> None:
        output = format_result(_err(msg="Bad input"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: flatten - Bad input"


class TestFormatResultDefault:
    def test_success_lists_data(self) -> None:
        output = format_result(_ok(result=[1, 2, 3], depth=1))
        assert "OK: flatten" in output
        assert "result: [1,2,3]" in output
        assert "depth: 1" in output
        assert "duration_ms" not in output

    def test_error(self) -> None:
        output = format_result(_err(msg="Input is not valid JSON"))
        assert "ERROR" in output
        assert "Input is not valid JSON" in output

    def test_brackets_are_not_markup(self) -> None:
        output = format_result(_ok(result=["[bold]x[/bold]"]))
        assert "[bold]x[/bold]" in output

    def test_verbose_includes_meta(self) -> None:
        output = format_result(_ok(result=[1]), settings=OutputSettings(verbose=True))
        assert "duration_ms: 1.5" in output
