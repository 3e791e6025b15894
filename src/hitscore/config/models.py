"""Configuration tables with their defaults.

hitscore.toml only needs the keys it changes; a missing file or table
means every default below applies.
"""

from __future__ import annotations

from pydantic import BaseModel

from hitscore.domain.score import NanPolicy


class CodecConfig(BaseModel):
    """The ``[codec]`` table.

    Attributes:
        nan_policy: ``error`` refuses NaN both ways; ``literal`` maps it to
            the ``"NaN"`` token.
    """

    model_config = {"frozen": True}

    nan_policy: NanPolicy = NanPolicy.ERROR
