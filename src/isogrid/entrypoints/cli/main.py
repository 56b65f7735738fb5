"""Top-level ``isogrid`` command.

The group (built with Click-Extra) sets up logging and the application
container, then hands over to one of the grid commands:

- ``isogrid width SPAN`` / ``isogrid position OFFSET``: one computed length.
- ``isogrid span SELECTOR SPAN [--at OFFSET]``: the isolation rule of a cell.
- ``isogrid row SELECTOR CELLS``: the rules of an equal-width row.
- ``isogrid settings``: the effective grid settings.

Default grid settings come from ``ISOGRID_COLUMNS``, ``ISOGRID_GUTTER`` and
``ISOGRID_GUTTER_FALLBACK``; each command can override them per call.

Examples
    $ isogrid --version
    $ isogrid span '.sidebar' 3 --at 9
    $ ISOGRID_GUTTER=2% isogrid row '.gallery > li' 4
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from isogrid import __version__
from isogrid.bootstrap import bootstrap
from isogrid.domain.errors import DomainError
from isogrid.logging import (
    DEFAULT_FLIGHT_CAPACITY,
    configure_logging,
    log_startup,
    verbosity_level,
)

from .grid import position, row, settings, span, width
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("isogrid", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """Isolation-grid CSS generator.

    Every cell of an isolation grid is floated and placed by its own
    margin-left, so no cell depends on its siblings and rounding errors do
    not add up along a row. Lengths mixing percentages with other units are
    written twice: a percentage fallback, then a calc() expression.
    """

EPILOG = "\b\n" + "\n".join(
    [
        click.style("Examples:", fg="blue", bold=True, underline=True),
        "  isogrid width 6 --gutter 2%",
        "  isogrid span '.sidebar' 3 --at 9",
        "  isogrid row '.gallery > li' 4",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Show more log output: INFO with -v, DEBUG with -vv.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Show less log output: ERROR with -q, CRITICAL with -qq.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything, with timestamps, logger names and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="ISOGRID_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_CAPACITY,
    hidden=True,
    envvar="ISOGRID_FLIGHT_RECORDER_CAPACITY",
    help="Number of log records kept in memory by the flight recorder.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory and write them to --log-path "
        "as soon as a WARNING is logged. Independent of -v/-q."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder to --log-path on a clean exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    show_envvar=True,
    help=(
        "Minimum level of one logger as NAME=LEVEL, applied to the console "
        "and the flight recorder alike. Repeatable, e.g. "
        "-L isogrid.service_layer=DEBUG. click_extra stays at WARNING "
        "unless named here."
    ),
)
@clickx.pass_context
def isogrid(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Isolation-grid CSS generator."""
    setup = configure_logging(
        level=verbosity_level(verbose_count, quiet_count),
        debug_mode=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        flight_capacity=flight_recorder_capacity,
        flush_on_close=force_flush,
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)

    try:
        ctx.obj = bootstrap()
    except DomainError as e:
        raise click.ClickException(f"Invalid default grid setting: {e}") from e

    log_startup(
        logger, setup, app_version=__version__, defaults=ctx.obj.settings.snapshot()
    )


for command in (width, position, span, row, settings):
    isogrid.add_command(command)
