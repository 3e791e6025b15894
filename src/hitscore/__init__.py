"""hitscore: relevance scores that survive a JSON round-trip, infinities included."""

from __future__ import annotations

from hitscore.domain.codec import dumps_score, loads_score
from hitscore.domain.errors import (
    ScoreCodecError,
    UnrepresentableScoreLiteral,
    UnsupportedScoreValue,
)
from hitscore.domain.score import NanPolicy, Score

__version__ = "0.1.0"

__all__ = [
    "NanPolicy",
    "Score",
    "ScoreCodecError",
    "UnrepresentableScoreLiteral",
    "UnsupportedScoreValue",
    "__version__",
    "dumps_score",
    "loads_score",
]
