"""Grid commands of the isogrid CLI.

Every command accepts the per-call overrides ``--columns``, ``--gutter`` and
``--gutter-fallback``; settings left out fall back to the defaults held by the
application container. Generated CSS is written to **stdout**; diagnostics and
warnings go to stderr.

Failure modes
- Unknown/invalid settings → ``ClickException`` with the domain error message
  (``settings`` reports them itself and exits with status 1).
- Spans that are negative or wider than the grid are emitted anyway, with a
  warning on stderr.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import click

from isogrid.domain.errors import DomainError
from isogrid.domain.grid import Declaration, declare
from isogrid.interfaces.settings import resolve_config
from isogrid.service_layer import layout

from .helpers import LENGTH, error, success, warn

if TYPE_CHECKING:
    from isogrid.bootstrap import AppContainer
    from isogrid.domain.value_objects import Length

logger = logging.getLogger(__name__)


def grid_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Add the per-call grid setting overrides to a command."""
    options = [
        click.option(
            "--columns",
            type=float,
            default=None,
            help="Total number of columns (default: current default setting).",
        ),
        click.option(
            "--gutter",
            type=LENGTH,
            default=None,
            help="Gutter between cells, e.g. 2% or 1rem.",
        ),
        click.option(
            "--gutter-fallback",
            type=LENGTH,
            default=None,
            help="Percentage used in place of a non-percentage gutter "
            "for consumers without calc() support.",
        ),
    ]
    return functools.reduce(
        lambda decorated, option: option(decorated), reversed(options), command
    )


def _overrides(
    columns: float | None, gutter: Length | None, gutter_fallback: Length | None
) -> dict[str, object]:
    given = {"columns": columns, "gutter": gutter, "gutter_fallback": gutter_fallback}
    return {key: value for key, value in given.items() if value is not None}


@contextmanager
def _domain_errors() -> Iterator[None]:
    try:
        yield
    except DomainError as e:
        raise click.ClickException(str(e)) from e


def _warn_outside_grid(
    container: AppContainer, overrides: dict[str, object], label: str, span: float
) -> None:
    columns = resolve_config(overrides, container.settings).columns
    if span < 0 or span > columns:
        serializer = container.serializer
        logger.debug("%s %s outside of %s columns", label, span, columns)
        warn(
            f"{label} of {serializer.number(span)} column(s) is outside "
            f"the {serializer.number(columns)}-column grid."
        )


def _echo_declarations(
    container: AppContainer, declarations: Iterable[Declaration]
) -> None:
    for declaration in declarations:
        click.echo(container.serializer.declaration(declaration))


@click.command()
@click.argument("span", type=float)
@grid_options
@click.pass_obj
def width(
    container: AppContainer,
    span: float,
    columns: float | None,
    gutter: Length | None,
    gutter_fallback: Length | None,
) -> None:
    """Print the width of a cell spanning SPAN columns."""
    overrides = _overrides(columns, gutter, gutter_fallback)
    with _domain_errors():
        _warn_outside_grid(container, overrides, "Span", span)
        result = layout.compute_width(span, overrides, provider=container.settings)
    _echo_declarations(container, declare("width", result))


@click.command()
@click.argument("offset", type=float)
@grid_options
@click.pass_obj
def position(
    container: AppContainer,
    offset: float,
    columns: float | None,
    gutter: Length | None,
    gutter_fallback: Length | None,
) -> None:
    """Print the margin-left placing a cell OFFSET columns from the start."""
    overrides = _overrides(columns, gutter, gutter_fallback)
    with _domain_errors():
        _warn_outside_grid(container, overrides, "Offset", offset)
        result = layout.compute_position(
            offset, overrides, provider=container.settings
        )
    _echo_declarations(container, declare("margin-left", result))


@click.command()
@click.argument("selector")
@click.argument("span", type=float)
@click.option(
    "--at",
    "offset",
    type=float,
    default=0.0,
    show_default=True,
    help="Number of columns before the cell.",
)
@grid_options
@click.pass_obj
def span(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    container: AppContainer,
    selector: str,
    span: float,  # pylint: disable=redefined-outer-name
    offset: float,
    columns: float | None,
    gutter: Length | None,
    gutter_fallback: Length | None,
) -> None:
    """Print the isolation rule for SELECTOR spanning SPAN columns."""
    overrides = _overrides(columns, gutter, gutter_fallback)
    with _domain_errors():
        _warn_outside_grid(container, overrides, "Span", span)
        _warn_outside_grid(container, overrides, "Offset", offset)
        declarations = layout.span_cell(
            span, offset, overrides, provider=container.settings
        )
    click.echo(container.serializer.rule(selector, declarations), nl=False)


@click.command()
@click.argument("selector")
@click.argument("cells", type=click.IntRange(min=1))
@grid_options
@click.pass_obj
def row(
    container: AppContainer,
    selector: str,
    cells: int,
    columns: float | None,
    gutter: Length | None,
    gutter_fallback: Length | None,
) -> None:
    """Print the rules laying out SELECTOR as CELLS equal-width cells per row."""
    overrides = _overrides(columns, gutter, gutter_fallback)
    with _domain_errors():
        distribution = layout.distribute_equal_width(
            cells, overrides, provider=container.settings
        )
    click.echo(container.serializer.row(selector, distribution), nl=False)


@click.command()
@grid_options
@click.pass_context
def settings(
    ctx: click.Context,
    columns: float | None,
    gutter: Length | None,
    gutter_fallback: Length | None,
) -> None:
    """Check and print the effective grid settings."""
    container: AppContainer = ctx.obj
    overrides = _overrides(columns, gutter, gutter_fallback)
    try:
        config = resolve_config(overrides, container.settings)
    except DomainError as e:
        error("Invalid grid settings")
        click.echo(str(e))
        ctx.exit(1)
    else:
        success("Grid settings valid")
        serializer = container.serializer
        click.echo(f"columns         : {serializer.number(config.columns)}")
        click.echo(f"gutter          : {serializer.value(config.gutter)}")
        click.echo(f"gutter_fallback : {serializer.value(config.gutter_fallback)}")
