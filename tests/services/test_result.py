"""Tests for CodecResult and CodecFailure."""

import json

import pytest
from pydantic import ValidationError

from hitscore.domain.score import NanPolicy
from hitscore.services.result import CodecFailure, CodecResult


class TestCodecResult:
    def test_success_construction(self) -> None:
        result = CodecResult(
            op="decode", input='"Infinity"', nan_policy=NanPolicy.ERROR, output="inf"
        )
        assert result.ok is True
        assert result.output == "inf"
        assert result.warnings == []
        assert result.error is None

    def test_failure_construction(self) -> None:
        failure = CodecFailure(code="UNREPRESENTABLE_LITERAL", message="bad literal", cause="x")
        result = CodecResult(op="decode", input="x", nan_policy=NanPolicy.ERROR, error=failure)
        assert result.ok is False
        assert result.output is None
        assert result.error is not None
        assert result.error.cause == "x"

    def test_needs_output_or_error(self) -> None:
        with pytest.raises(ValidationError, match="exactly one"):
            CodecResult(op="encode", input="1", nan_policy=NanPolicy.ERROR)

    def test_rejects_output_and_error_together(self) -> None:
        with pytest.raises(ValidationError, match="exactly one"):
            CodecResult(
                op="encode",
                input="1",
                nan_policy=NanPolicy.ERROR,
                output="1",
                error=CodecFailure(code="E", message="m"),
            )

    def test_unknown_op_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CodecResult(
                op="transcode",  # type: ignore[arg-type]
                input="1",
                nan_policy=NanPolicy.ERROR,
                output="1",
            )

    def test_json_serialization(self) -> None:
        result = CodecResult(
            op="encode", input="inf", nan_policy=NanPolicy.LITERAL, output='"Infinity"'
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed == {
            "op": "encode",
            "input": "inf",
            "nan_policy": "literal",
            "output": '"Infinity"',
            "warnings": [],
            "error": None,
            "ok": True,
        }

    def test_frozen(self) -> None:
        result = CodecResult(op="encode", input="1", nan_policy=NanPolicy.ERROR, output="1")
        with pytest.raises(ValidationError):
            result.output = "2"  # type: ignore[misc]


class TestCodecFailure:
    def test_default_cause(self) -> None:
        assert CodecFailure(code="E", message="m").cause is None
