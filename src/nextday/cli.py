"""nextday entry point: read DAY MONTH YEAR, print the following date."""

from __future__ import annotations

import click

from nextday import __version__
from nextday.commands._context import AppContext
from nextday.config.settings import NextDaySettings

EXAMPLES = """\
  echo "28 2 2024" | nextday
  nextday 31 12 2023
  nextday 1 -1 2000            # exit 1: month out of range
  nextday --json 15 12 2023
  NEXTDAY_BOUNDS__YEAR__MIN=1583 nextday 1 1 1583
  nextday -c ./nextday.toml 1 1 1600"""


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(EXAMPLES)
    ctx.exit(0)


# Unknown options pass through as fields so "-1" reaches range validation.
@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__, prog_name="nextday")
@click.argument("fields", nargs=-1, metavar="[DAY MONTH YEAR]")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(),
    default=None,
    help="Use this nextday.toml instead of discovery.",
)
@click.option(
    "--examples",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_examples,
    help="Show usage examples and exit.",
)
def cli(
    fields: tuple[str, ...],
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Validate a Gregorian date and print the day after it as YYYY-MM-DD.

    The date is read from standard input as three whitespace-separated
    integers (day, month, year) unless given as arguments.

    Exit codes: 0 success, 1 out-of-range field or malformed input,
    2 day beyond the length of its month.
    """
    settings = NextDaySettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    if fields:
        text = " ".join(fields)
    else:
        with click.open_file("-") as stdin:
            text = stdin.read()
    app.emit(app.service.compute_from_text(text))
