"""The Score value type.

A Score is a relevance/ranking value reported by a search engine for a hit.
It is a plain 64-bit float in every respect except JSON: engines report
unbounded scores as the quoted tokens ``"Infinity"`` and ``"-Infinity"``,
which strict JSON cannot express as bare numbers.

Wire format:

    ======  ===============
    Score   JSON
    ======  ===============
    0       ``0``
    42.195  ``42.195``
    +inf    ``"Infinity"``
    -inf    ``"-Infinity"``
    ======  ===============

INVARIANT: A Score compares, hashes, and computes exactly like the float
it wraps. Only (de)serialization differs.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic_core import core_schema

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

POSITIVE_INFINITY_LITERAL = "Infinity"
NEGATIVE_INFINITY_LITERAL = "-Infinity"
NAN_LITERAL = "NaN"


class NanPolicy(StrEnum):
    """How the codec treats NaN, which has no agreed JSON encoding."""

    ERROR = "error"
    LITERAL = "literal"


class Score(float):
    """Search-hit relevance score with an Infinity-aware JSON encoding.

    Usable as a pydantic field type: models validate and dump it through
    :mod:`hitscore.domain.codec` automatically::

        class Hit(BaseModel):
            id: str
            score: Score | None = None

        Hit(id="a", score=math.inf).model_dump_json()
        # '{"id":"a","score":"Infinity"}'
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Score({float.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from hitscore.domain.codec import score_to_jsonable, validate_score_field

        return core_schema.with_info_plain_validator_function(
            validate_score_field,
            serialization=core_schema.plain_serializer_function_ser_schema(
                score_to_jsonable,
                info_arg=False,
                when_used="json",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "anyOf": [
                {"type": "number"},
                {
                    "type": "string",
                    "enum": [POSITIVE_INFINITY_LITERAL, NEGATIVE_INFINITY_LITERAL],
                },
            ],
            "title": "Score",
        }


POSITIVE_INFINITY = Score(math.inf)
NEGATIVE_INFINITY = Score(-math.inf)
