"""Score codec errors.

Every failure is a ``ValueError`` so that pydantic turns it into a
``ValidationError`` when it happens inside model validation.
"""

from __future__ import annotations


class ScoreCodecError(ValueError):
    """Base class for Score encode/decode failures."""


class UnrepresentableScoreLiteral(ScoreCodecError):
    """Input is neither a JSON number nor a recognized score token.

    Attributes:
        literal: The raw offending input, exactly as received.
        cause: The failure from decoding the input as a number. This is
            always the numeric diagnostic, even when the string form was
            also attempted.
    """

    def __init__(self, literal: object, cause: ValueError) -> None:
        self.literal = literal
        self.cause = cause
        super().__init__(f"{literal!r} cannot be decoded as a Score: {cause}")


class UnsupportedScoreValue(ScoreCodecError):
    """Score value has no JSON encoding under the active NaN policy."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"{value!r} has no JSON encoding as a Score")
