"""JSON encode/decode for Score values.

Decoding is a two-branch decision. The input is classified as either a
bare JSON number (:class:`NumberForm`) or a JSON string that may hold one
of the special tokens (:class:`SpecialStringForm`), and only then resolved
to a Score. Input that is neither is rejected during classification.

INVARIANT: The numeric-parse failure is the reported cause of every
decode error. The number form is the expected shape; the string form only
exists for the infinity tokens, so its parse failure is never surfaced.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from hitscore.domain.errors import UnrepresentableScoreLiteral, UnsupportedScoreValue
from hitscore.domain.score import (
    NAN_LITERAL,
    NEGATIVE_INFINITY_LITERAL,
    POSITIVE_INFINITY_LITERAL,
    NanPolicy,
    Score,
)

if TYPE_CHECKING:
    from pydantic_core.core_schema import ValidationInfo

logger = logging.getLogger(__name__)

# Integral floats below this magnitude are written without a fraction (0, not 0.0).
_EXACT_INT_LIMIT = 2.0**53


@dataclass(frozen=True, slots=True)
class NumberForm:
    """Input decoded as a finite JSON number."""

    value: float


@dataclass(frozen=True, slots=True)
class SpecialStringForm:
    """Input decoded as a JSON string; it still has to name a known token."""

    literal: object
    text: str
    number_error: ValueError


ScoreForm = NumberForm | SpecialStringForm


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not a valid JSON number")


def _decode_number(raw: bytes | str) -> float | ValueError:
    """Decode *raw* as a bare JSON number.

    The failure is returned rather than raised so the caller can hold on
    to it while trying the string form.
    """
    try:
        value = json.loads(raw, parse_int=float, parse_constant=_reject_constant)
    except ValueError as exc:
        return exc
    if isinstance(value, bool) or not isinstance(value, float):
        kind = "boolean" if isinstance(value, bool) else type(value).__name__
        return ValueError(f"JSON {kind} cannot be decoded as a number")
    if not math.isfinite(value):
        return ValueError(f"number {_preview(raw)} is out of range for a 64-bit float")
    return value


def _decode_string(raw: bytes | str) -> str | None:
    """Decode *raw* as a JSON string, or return None if it is not one."""
    try:
        value = json.loads(raw)
    except ValueError:
        return None
    return value if isinstance(value, str) else None


def _preview(raw: bytes | str) -> str:
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    return text.strip()


def classify_literal(raw: bytes | str) -> ScoreForm:
    """Classify a JSON literal as a number or a candidate token string.

    Raises:
        UnrepresentableScoreLiteral: *raw* is neither a JSON number nor a
            JSON string. The numeric-parse failure is the cause.
    """
    number = _decode_number(raw)
    if not isinstance(number, ValueError):
        return NumberForm(number)

    text = _decode_string(raw)
    if text is None:
        logger.debug("Score literal is neither number nor string: %r", raw)
        raise UnrepresentableScoreLiteral(raw, number) from number
    logger.debug("Score literal fell back to string form: %r", text)
    return SpecialStringForm(literal=raw, text=text, number_error=number)


def resolve_form(form: ScoreForm, *, nan_policy: NanPolicy = NanPolicy.ERROR) -> Score:
    """Turn a classified literal into a Score.

    Raises:
        UnrepresentableScoreLiteral: The string is not a recognized token.
    """
    if isinstance(form, NumberForm):
        return Score(form.value)
    if form.text == POSITIVE_INFINITY_LITERAL:
        return Score(math.inf)
    if form.text == NEGATIVE_INFINITY_LITERAL:
        return Score(-math.inf)
    if form.text == NAN_LITERAL and nan_policy is NanPolicy.LITERAL:
        return Score(math.nan)
    logger.debug("Unrecognized score token: %r", form.text)
    raise UnrepresentableScoreLiteral(form.literal, form.number_error) from form.number_error


def loads_score(raw: bytes | str, *, nan_policy: NanPolicy = NanPolicy.ERROR) -> Score:
    """Decode a JSON literal into a Score.

    Accepts a bare JSON number or one of the quoted tokens ``"Infinity"``
    and ``"-Infinity"`` (and ``"NaN"`` under :attr:`NanPolicy.LITERAL`).
    Token comparison happens after JSON unescaping, so ``"\\u0049nfinity"``
    is accepted too.

    Raises:
        UnrepresentableScoreLiteral: Anything else.
    """
    return resolve_form(classify_literal(raw), nan_policy=nan_policy)


def score_to_jsonable(
    value: float, *, nan_policy: NanPolicy = NanPolicy.ERROR
) -> int | float | str:
    """Map a score onto the JSON value it is written as.

    Infinities become their string tokens. Finite integral values below
    2**53 become ints so they are written as ``0`` rather than ``0.0``;
    negative zero keeps its sign.

    Raises:
        UnsupportedScoreValue: *value* is NaN under :attr:`NanPolicy.ERROR`.
    """
    number = float(value)
    if number == math.inf:
        return POSITIVE_INFINITY_LITERAL
    if number == -math.inf:
        return NEGATIVE_INFINITY_LITERAL
    if math.isnan(number):
        if nan_policy is NanPolicy.LITERAL:
            return NAN_LITERAL
        raise UnsupportedScoreValue(number)
    negative_zero = number == 0 and math.copysign(1.0, number) < 0
    if number.is_integer() and abs(number) < _EXACT_INT_LIMIT and not negative_zero:
        return int(number)
    return number


def dumps_score(value: float, *, nan_policy: NanPolicy = NanPolicy.ERROR) -> bytes:
    """Encode a score as JSON bytes.

    Finite values use the shortest text that parses back to the same float.
    Negative zero is written ``-0``, like the other integral values.

    Raises:
        UnsupportedScoreValue: *value* is NaN under :attr:`NanPolicy.ERROR`.
    """
    jsonable = score_to_jsonable(value, nan_policy=nan_policy)
    if jsonable == 0 and math.copysign(1.0, jsonable) < 0:
        return b"-0"
    return json.dumps(jsonable).encode("utf-8")


def coerce_score(value: object, *, from_json: bool = False) -> Score:
    """Validate an already-decoded value into a Score.

    This is the pydantic validator for Score fields. In JSON mode pydantic
    has parsed the document already, so numbers arrive as int/float and
    tokens as str. A non-finite float there can only come from a bare
    ``Infinity``/``NaN`` word or an overflowing number, neither of which
    :func:`loads_score` accepts, so *from_json* rejects it. NaN is rejected
    in both modes: a model must never hold a score it cannot dump.

    Raises:
        UnrepresentableScoreLiteral: *value* is not a number or a token.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            number = float(value)
        except OverflowError:
            number_error = ValueError(f"number {value} is out of range for a 64-bit float")
            raise UnrepresentableScoreLiteral(value, number_error) from number_error
        if math.isnan(number) or (from_json and math.isinf(number)):
            number_error = ValueError(f"{number!r} is not a valid JSON number")
            raise UnrepresentableScoreLiteral(value, number_error) from number_error
        return value if isinstance(value, Score) else Score(number)
    kind = "boolean" if isinstance(value, bool) else type(value).__name__
    number_error = ValueError(f"{kind} cannot be decoded as a number")
    if isinstance(value, str):
        form = SpecialStringForm(literal=value, text=value, number_error=number_error)
        return resolve_form(form)
    raise UnrepresentableScoreLiteral(value, number_error) from number_error


def validate_score_field(value: object, info: ValidationInfo) -> Score:
    """pydantic entry point: :func:`coerce_score` with the validation mode applied."""
    return coerce_score(value, from_json=info.mode == "json")
