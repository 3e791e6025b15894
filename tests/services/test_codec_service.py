"""Tests for ScoreCodecService."""

from __future__ import annotations

import pytest

from hitscore.config.models import CodecConfig
from hitscore.domain.score import NanPolicy
from hitscore.services.codec import ScoreCodecService


@pytest.fixture
def svc() -> ScoreCodecService:
    return ScoreCodecService()


@pytest.fixture
def lenient_svc() -> ScoreCodecService:
    return ScoreCodecService(CodecConfig(nan_policy=NanPolicy.LITERAL))


class TestEncode:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0", "0"),
            ("42.195", "42.195"),
            ("inf", '"Infinity"'),
            ("Infinity", '"Infinity"'),
            ("-inf", '"-Infinity"'),
            ("1e3", "1000"),
            ("-0", "-0"),
        ],
    )
    def test_encodes(self, svc: ScoreCodecService, value: str, expected: str) -> None:
        result = svc.encode(value)
        assert result.ok, result.error
        assert result.op == "encode"
        assert result.input == value
        assert result.output == expected
        assert result.warnings == []
        assert result.nan_policy is NanPolicy.ERROR

    def test_invalid_number(self, svc: ScoreCodecService) -> None:
        result = svc.encode("banana")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_NUMBER"
        assert "'banana'" in result.error.message
        assert result.input == "banana"

    def test_nan_refused(self, svc: ScoreCodecService) -> None:
        result = svc.encode("nan")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNSUPPORTED_VALUE"
        assert result.nan_policy is NanPolicy.ERROR

    def test_nan_literal(self, lenient_svc: ScoreCodecService) -> None:
        result = lenient_svc.encode("nan")
        assert result.ok
        assert result.output == '"NaN"'
        assert result.nan_policy is NanPolicy.LITERAL

    def test_rounding_warning(self, svc: ScoreCodecService) -> None:
        result = svc.encode("0.10000000000000000000001")
        assert result.ok
        assert result.output == "0.1"
        assert len(result.warnings) == 1
        assert "rounded" in result.warnings[0]

    def test_exact_input_has_no_warning(self, svc: ScoreCodecService) -> None:
        assert svc.encode("0.1").warnings == []
        assert svc.encode("1e5").warnings == []

    @pytest.mark.parametrize(
        "value,expected",
        [("1e400", '"Infinity"'), ("-1e400", '"-Infinity"'), ("1" * 400, '"Infinity"')],
    )
    def test_overflow_to_infinity_warns(
        self, svc: ScoreCodecService, value: str, expected: str
    ) -> None:
        result = svc.encode(value)
        assert result.ok
        assert result.output == expected
        assert len(result.warnings) == 1
        assert "beyond the 64-bit float range" in result.warnings[0]

    @pytest.mark.parametrize("value", ["inf", "-inf", "+Infinity", " INF ", "-infinity"])
    def test_spelled_infinity_has_no_warning(self, svc: ScoreCodecService, value: str) -> None:
        assert svc.encode(value).warnings == []


class TestDecode:
    @pytest.mark.parametrize(
        "literal,expected",
        [
            ("0", "0.0"),
            ("42.195", "42.195"),
            ('"Infinity"', "inf"),
            ('"-Infinity"', "-inf"),
            ("-0", "-0.0"),
        ],
    )
    def test_decodes(self, svc: ScoreCodecService, literal: str, expected: str) -> None:
        result = svc.decode(literal)
        assert result.ok, result.error
        assert result.op == "decode"
        assert result.input == literal
        assert result.output == expected

    def test_not_a_number(self, svc: ScoreCodecService) -> None:
        result = svc.decode("not_a_number")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNREPRESENTABLE_LITERAL"
        assert "not_a_number" in result.error.message
        assert result.error.cause is not None
        assert result.error.cause.startswith("Expecting value")

    def test_unknown_token(self, svc: ScoreCodecService) -> None:
        result = svc.decode('"banana"')
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNREPRESENTABLE_LITERAL"

    def test_nan_token(self, svc: ScoreCodecService, lenient_svc: ScoreCodecService) -> None:
        assert not svc.decode('"NaN"').ok
        result = lenient_svc.decode('"NaN"')
        assert result.ok
        assert result.output == "nan"
