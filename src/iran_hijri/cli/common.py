"""
Command-line interface utilities for iran_hijri.

This module provides helpers shared by the CLI commands: logging
configuration, date argument parsing and building the converter.
"""

import logging
import re
from typing import Any, Dict, Tuple

import click

from ..converter import HijriConverter
from ..errors import TableFormatError
from ..logging import set_log_level
from ..official.loader import bundled_table, load_table

_DATE_PATTERN = re.compile(r"^\s*(-?\d+)[-/](\d{1,2})[-/](\d{1,2})\s*$")


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags ("quiet", "debug", "verbose")
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)

    logging.getLogger("iran_hijri").debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_date_argument(value: str) -> Tuple[int, int, int]:
    """Parse a YYYY-MM-DD or YYYY/MM/DD date into (year, month, day).

    Only the shape is checked here; whether the date exists depends on the
    calendar it is read in.

    Raises:
        click.BadParameter: If the value is not shaped like a date
    """
    match = _DATE_PATTERN.match(value)
    if match is None:
        raise click.BadParameter(
            f"Invalid date format: {value}. Use YYYY-MM-DD or YYYY/MM/DD."
        )
    year, month, day = (int(part) for part in match.groups())
    return year, month, day


def converter_from_context(ctx: click.Context) -> HijriConverter:
    """Return the converter for the table chosen on the command line.

    The table is loaded the first time a command asks for it, so commands
    that do not convert never touch the file.

    Raises:
        click.BadParameter: If the table file cannot be read or is malformed
    """
    obj = ctx.ensure_object(dict)
    if "converter" not in obj:
        path = obj.get("table")
        if path is None:
            table = bundled_table()
        else:
            try:
                table = load_table(path)
            except (OSError, TableFormatError) as e:
                raise click.BadParameter(str(e), param_hint="--table")
        obj["converter"] = HijriConverter(table)
    return obj["converter"]
