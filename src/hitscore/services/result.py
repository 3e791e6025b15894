"""CodecResult: what a codec service call hands back to the CLI.

INVARIANT: Service methods report codec failures in the result and never
raise them. ``ok`` is True exactly when ``error`` is None.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field, model_validator

from hitscore.domain.score import NanPolicy

Operation = Literal["encode", "decode"]


class CodecFailure(BaseModel):
    """Why a codec call failed.

    Attributes:
        code: ``INVALID_NUMBER``, ``UNSUPPORTED_VALUE`` or
            ``UNREPRESENTABLE_LITERAL``.
        message: One-line description, including the offending input.
        cause: The numeric-parse diagnostic behind a decode failure.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    cause: str | None = None


class CodecResult(BaseModel):
    """Outcome of one encode or decode call.

    ``output`` is the JSON literal for ``encode`` and the Python spelling
    of the float (``42.195``, ``inf``) for ``decode``.
    """

    model_config = {"frozen": True}

    op: Operation
    input: str
    nan_policy: NanPolicy
    output: str | None = None
    warnings: list[str] = Field(default_factory=list)
    error: CodecFailure | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return self.error is None

    @model_validator(mode="after")
    def _output_xor_error(self) -> CodecResult:
        if (self.output is None) == (self.error is None):
            raise ValueError("exactly one of output and error must be set")
        return self
