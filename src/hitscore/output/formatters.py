"""Render a CodecResult for a terminal or for another program.

Human mode prints ``OK: <op>`` followed by indented ``key: value`` lines.
Quiet mode prints the output alone so it can be piped. JSON mode dumps
the whole result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from hitscore.services.result import CodecResult


class OutputSettings(BaseModel):
    """Output mode flags taken from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: CodecResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format *result* for display.

    Args:
        result: The codec result to format.
        settings: Output flags. Takes precedence over *json_output*.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)

    if settings.json_output:
        return result.model_dump_json(indent=2)
    if result.error is not None:
        return f"ERROR: {result.op}: {result.error.message}"
    if settings.quiet:
        return result.output or ""

    lines = [f"OK: {result.op}", f"  input: {result.input}", f"  output: {result.output}"]
    if settings.verbose:
        lines.append(f"  nan_policy: {result.nan_policy}")
    return "\n".join(lines)
