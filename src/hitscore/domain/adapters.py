"""Ready-made pydantic adapters for bare (not embedded) Score values.

``ScoreAdapter.validate_json(b'"Infinity"')`` and
``OptionalScoreAdapter.dump_json(None)`` go through the same hooks as a
Score field inside a model, so a bare value and an embedded value always
encode identically.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from hitscore.domain.score import Score

ScoreAdapter: TypeAdapter[Score] = TypeAdapter(Score)
OptionalScoreAdapter: TypeAdapter[Score | None] = TypeAdapter(Score | None)
