"""CLI commands for converting dates to and from Hijri."""

import json

import click

from ..calendars.types import ConversionResult
from ..calendars.validation import (
    is_valid_gregorian_date,
    is_valid_hijri_date,
    is_valid_jalaali_date,
)
from ..errors import IranHijriError
from .common import converter_from_context, parse_date_argument

CALENDARS = ["jalaali", "gregorian"]

VALIDATORS = {
    "jalaali": is_valid_jalaali_date,
    "gregorian": is_valid_gregorian_date,
    "hijri": is_valid_hijri_date,
}


def _echo_result(result: ConversionResult, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return
    click.echo(f"{result.date} ({result.source.value})")
    click.echo(
        f"{result.weekday.english} / {result.weekday.persian} / {result.weekday.arabic}"
    )


@click.command("to-hijri")
@click.argument("date")
@click.option(
    "--from",
    "calendar",
    type=click.Choice(CALENDARS),
    default="jalaali",
    help="Calendar DATE is given in. Defaults to jalaali.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def to_hijri(ctx: click.Context, date: str, calendar: str, as_json: bool) -> None:
    """Convert DATE (YYYY-MM-DD) to the Hijri calendar."""
    year, month, day = parse_date_argument(date)
    converter = converter_from_context(ctx)
    try:
        if calendar == "jalaali":
            result = converter.jalaali_to_hijri(year, month, day)
        else:
            result = converter.gregorian_to_hijri(year, month, day)
    except IranHijriError as e:
        raise click.ClickException(str(e))
    _echo_result(result, as_json)


@click.command("from-hijri")
@click.argument("date")
@click.option(
    "--to",
    "calendar",
    type=click.Choice(CALENDARS),
    default="jalaali",
    help="Calendar to convert into. Defaults to jalaali.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def from_hijri(
    ctx: click.Context, date: str, calendar: str, as_json: bool
) -> None:
    """Convert a Hijri DATE (YYYY-MM-DD) to another calendar."""
    year, month, day = parse_date_argument(date)
    converter = converter_from_context(ctx)
    try:
        if calendar == "jalaali":
            result = converter.hijri_to_jalaali(year, month, day)
        else:
            result = converter.hijri_to_gregorian(year, month, day)
    except IranHijriError as e:
        raise click.ClickException(str(e))
    _echo_result(result, as_json)


@click.command("source-info")
@click.argument("year", type=int)
@click.argument("month", type=click.IntRange(1, 12), required=False, default=1)
@click.pass_context
def source_info(ctx: click.Context, year: int, month: int) -> None:
    """Show whether Hijri YEAR/MONTH is covered by official data."""
    info = converter_from_context(ctx).get_source_info(year, month)
    click.echo(json.dumps(info.to_dict(), indent=2))


@click.command()
@click.argument("calendar", type=click.Choice(sorted(VALIDATORS)))
@click.argument("date")
def validate(calendar: str, date: str) -> None:
    """Check whether DATE exists in CALENDAR. Exits 1 if it does not."""
    year, month, day = parse_date_argument(date)
    if VALIDATORS[calendar](year, month, day):
        click.echo(f"{date} is a valid {calendar} date")
    else:
        click.echo(f"{date} is not a valid {calendar} date")
        raise SystemExit(1)
