"""CLI entry point for iran_hijri."""

from typing import Optional

import click

from . import common as common
from .convert import from_hijri, source_info, to_hijri, validate
from ..logging import get_logger
from ..official.loader import TABLE_ENV_VAR

logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
@click.option(
    "--table",
    type=click.Path(dir_okay=False),
    envvar=TABLE_ENV_VAR,
    help=f"JSON file of official month lengths to use instead of the bundled table. "
    f"Can also be set with {TABLE_ENV_VAR}.",
)
@click.pass_context
def cli(
    ctx: click.Context, verbose: int, debug: bool, quiet: bool, table: Optional[str]
) -> None:
    """Convert dates between the Jalaali, Gregorian and Hijri calendars."""
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")

    # The table is only read by commands that convert
    ctx.obj = {"table": table}


cli.add_command(to_hijri)
cli.add_command(from_hijri)
cli.add_command(source_info)
cli.add_command(validate)
if __name__ == "__main__":
    cli()
