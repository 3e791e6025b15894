"""ScoreCodecService: the codec behind the CLI, reporting through CodecResult."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation

import structlog

from hitscore.config.models import CodecConfig
from hitscore.domain.codec import dumps_score, loads_score
from hitscore.domain.errors import UnrepresentableScoreLiteral, UnsupportedScoreValue
from hitscore.services.result import CodecFailure, CodecResult, Operation

log = structlog.get_logger(__name__)

_INFINITY_SPELLINGS = frozenset({"inf", "infinity"})


def _rounding_warning(text: str, value: float) -> str | None:
    """Describe how the float parsed from *text* differs from what *text* says."""
    spelled = text.strip()
    if math.isinf(value):
        if spelled.lstrip("+-").lower() in _INFINITY_SPELLINGS:
            return None
        return f"{spelled} is beyond the 64-bit float range and became {value!r}"
    if math.isnan(value):
        return None
    try:
        exact = Decimal(spelled) == Decimal(float.__repr__(value))
    except InvalidOperation:
        return None
    return None if exact else f"{spelled} was rounded to the nearest 64-bit float"


class ScoreCodecService:
    """Encode and decode scores under one NaN policy."""

    def __init__(self, config: CodecConfig | None = None) -> None:
        self._policy = (config or CodecConfig()).nan_policy

    def encode(self, value: str) -> CodecResult:
        """Encode the number spelled by *value* (``inf`` and ``nan`` allowed) as JSON."""
        try:
            number = float(value)
        except ValueError:
            failure = CodecFailure(code="INVALID_NUMBER", message=f"{value!r} is not a number")
            return self._failed("encode", value, failure)

        try:
            encoded = dumps_score(number, nan_policy=self._policy).decode("utf-8")
        except UnsupportedScoreValue as exc:
            failure = CodecFailure(code="UNSUPPORTED_VALUE", message=str(exc))
            return self._failed("encode", value, failure)

        warning = _rounding_warning(value, number)
        log.debug("score.encoded", input=value, output=encoded, inexact=warning is not None)
        return CodecResult(
            op="encode",
            input=value,
            nan_policy=self._policy,
            output=encoded,
            warnings=[warning] if warning else [],
        )

    def decode(self, literal: str) -> CodecResult:
        """Decode a JSON literal and spell the score the way Python prints floats."""
        try:
            score = loads_score(literal, nan_policy=self._policy)
        except UnrepresentableScoreLiteral as exc:
            failure = CodecFailure(
                code="UNREPRESENTABLE_LITERAL", message=str(exc), cause=str(exc.cause)
            )
            return self._failed("decode", literal, failure)
        output = float.__repr__(score)
        log.debug("score.decoded", input=literal, output=output)
        return CodecResult(op="decode", input=literal, nan_policy=self._policy, output=output)

    def _failed(self, op: Operation, text: str, failure: CodecFailure) -> CodecResult:
        log.debug("score.rejected", op=op, input=text, code=failure.code)
        return CodecResult(op=op, input=text, nan_policy=self._policy, error=failure)
