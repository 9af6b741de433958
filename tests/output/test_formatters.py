"""Tests for format_result and the Rich renderers."""

import json

from dkmap.output.formatters import OutputSettings, format_result
from dkmap.services.result import ServiceError, ServiceResult

_RHYTHMS = [{"character": "$", "beats": [["BackLeftBongo", 150], ["ClapMicrophone", None]]}]


def _ok(op: str = "validate", **data: object) -> ServiceResult:
    base: dict[str, object] = {
        "file": "mappings.toml",
        "debounce": 200,
        "combo_window": 100,
        "microphone": False,
        "rhythms": _RHYTHMS,
    }
    base.update(data)
    return ServiceResult(ok=True, op=op, data=base, meta={"file": "mappings.toml"})


def _err(op: str = "validate", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="INVALID_BEAT", message=msg, detail={"beat": "XYZ"}),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "validate"
        assert data["data"]["rhythms"] == _RHYTHMS

    def test_json_mode_error(self) -> None:
        data = json.loads(format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"
        assert data["error"]["code"] == "INVALID_BEAT"


class TestFormatResultHuman:
    def test_settings_render(self) -> None:
        output = format_result(_ok())
        assert output.startswith("OK")
        assert "debounce: 200" in output
        assert "rhythms: 1" in output
        assert "BackLeftBongo +150ms" in output
        assert "ClapMicrophone" in output

    def test_apply_fallback_render(self) -> None:
        output = format_result(
            _ok(
                "apply",
                source="defaults",
                rhythms=[],
                fallback={"code": "INVALID_TOML", "message": "broken"},
            )
        )
        assert "source: defaults" in output
        assert "INVALID_TOML" in output
        assert "rhythms: 0" in output

    def test_error_render(self) -> None:
        output = format_result(_err(msg="Unknown beat 'XYZ'"))
        assert output.startswith("ERROR")
        assert "Unknown beat 'XYZ'" in output
        assert "code" not in output

    def test_verbose_error_shows_detail(self) -> None:
        output = format_result(_err(), settings=OutputSettings(verbose=True))
        assert "code: INVALID_BEAT" in output
        assert "beat: 'XYZ'" in output

    def test_verbose_shows_meta(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(verbose=True))
        assert "meta:" in output


class TestFormatResultQuiet:
    def test_quiet_ok(self) -> None:
        assert format_result(_ok(), settings=OutputSettings(quiet=True)) == "OK: validate"

    def test_quiet_error(self) -> None:
        output = format_result(_err(msg="Bad"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: validate - Bad"
