"""The ``hitscore`` command: encode and decode scores from the shell."""

from __future__ import annotations

import click

from hitscore import __version__
from hitscore.config.logging import configure_logging
from hitscore.config.settings import ConfigFileError, HitscoreSettings
from hitscore.output.formatters import OutputSettings, format_result
from hitscore.services.codec import ScoreCodecService
from hitscore.services.result import CodecResult

ENCODE_EXAMPLES = """\
Examples:

\b
  hitscore encode 42.195
  hitscore encode inf
  hitscore encode -- -inf
  hitscore --json encode 0
"""

DECODE_EXAMPLES = """\
Examples:

\b
  hitscore decode 42.195
  hitscore decode '"Infinity"'
  hitscore decode -- '"-Infinity"'
  hitscore -q decode 1e3
"""


def _emit(settings: HitscoreSettings, result: CodecResult) -> None:
    """Print *result*: stdout and exit 0 on success, stderr and exit 1 on failure.

    Warnings go to stderr unless they are already part of the JSON payload.
    """
    output = format_result(
        result,
        settings=OutputSettings(
            json_output=settings.json_output, quiet=settings.quiet, verbose=settings.verbose
        ),
    )
    if not result.ok:
        click.echo(output, err=True)
        raise SystemExit(1)
    click.echo(output)
    if not settings.json_output:
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hitscore")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting value.")
@click.option("-v", "--verbose", is_flag=True, help="Show the NaN policy and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="TOML file to read instead of ./hitscore.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """hitscore: encode and decode search-hit relevance scores as JSON."""
    try:
        settings = HitscoreSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ConfigFileError as exc:
        raise click.ClickException(str(exc)) from exc
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(epilog=ENCODE_EXAMPLES)
@click.argument("value")
@click.pass_obj
def encode(settings: HitscoreSettings, value: str) -> None:
    """Encode VALUE (a number, inf, -inf or nan) as a JSON score."""
    _emit(settings, ScoreCodecService(settings.codec).encode(value))


@cli.command(epilog=DECODE_EXAMPLES)
@click.argument("literal")
@click.pass_obj
def decode(settings: HitscoreSettings, literal: str) -> None:
    """Decode LITERAL (a JSON number, "Infinity" or "-Infinity") into a score."""
    _emit(settings, ScoreCodecService(settings.codec).decode(literal))
