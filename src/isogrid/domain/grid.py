"""Isolation grid formulas.

Every cell of an isolation grid is floated left and given ``margin-right:
-100%`` so that it occupies no horizontal space in the flow. Each cell is then
placed by its own ``margin-left`` and sized by its own ``width``, so no cell
depends on its siblings' dimensions and rounding errors cannot accumulate
along a row.

All functions here are pure: they depend only on their arguments and on the
`GridConfig` they are given.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import cast

from .errors import InvalidLayoutError
from .expressions import (
    Calc,
    FormattedLength,
    Term,
    Value,
    add,
    evaluate,
    multiply,
    subtract,
)
from .value_objects import Dimension, GridConfig, Length, Percentage

FULL_WIDTH = Percentage(100.0)


@dataclass(frozen=True, slots=True)
class Declaration:
    """A single CSS property/value pair."""

    name: str
    value: str | Value


# Declarations shared by every isolated cell.
ISOLATION: tuple[Declaration, ...] = (
    Declaration("float", "left"),
    Declaration("margin-right", Percentage(-100.0)),
)


@dataclass(frozen=True, slots=True)
class NthChild:
    """The ``:nth-child(<stride>n + <phase>)`` pattern of a row position."""

    stride: float
    phase: int


@dataclass(frozen=True, slots=True)
class ChildRule:
    """Placement of every child sharing a phase within a row."""

    pattern: NthChild
    position: FormattedLength
    clear: bool

    def declarations(self) -> tuple[Declaration, ...]:
        """Return the margin-left declaration(s) followed by the clear rule."""
        return (
            *declare("margin-left", self.position),
            Declaration("clear", "both" if self.clear else "none"),
        )


@dataclass(frozen=True, slots=True)
class RowDistribution:
    """Result of distributing equal-width cells across a row."""

    shared_width: FormattedLength
    rules: tuple[ChildRule, ...]

    def cell_declarations(self) -> tuple[Declaration, ...]:
        """Return the declarations common to every cell of the row."""
        return (*ISOLATION, *declare("width", self.shared_width))


def width_term(fraction: float, gutter: Length) -> Term:
    """Build ``(100% + gutter) * fraction - gutter``."""
    return subtract(position_term(fraction, gutter), gutter)


def position_term(fraction: float, gutter: Length) -> Term:
    """Build ``(100% + gutter) * fraction``."""
    return multiply(add(FULL_WIDTH, gutter), fraction)


def _formatted(
    build: Callable[[float, Length], Term], span: float, config: GridConfig
) -> FormattedLength:
    fraction = span / config.columns
    match config.gutter:
        case Percentage():
            exact = evaluate(build(fraction, config.gutter))
            return FormattedLength(cast(Percentage, exact))
        case Dimension():
            fallback = evaluate(build(fraction, config.gutter_fallback))
            return FormattedLength(
                cast(Percentage, fallback), Calc(build(fraction, config.gutter))
            )
    raise TypeError(f"Unsupported gutter {config.gutter!r}")  # pragma: no cover


def compute_width(span_columns: float, config: GridConfig) -> FormattedLength:
    """Compute the width of a cell spanning `span_columns` columns.

    Args:
        span_columns: Number of columns covered; may be fractional. Spans that
            are negative or larger than `config.columns` are not rejected.
        config: The grid settings.

    Returns:
        A single percentage when the gutter is a percentage, otherwise a
        percentage fallback (computed with `config.gutter_fallback`) and the
        exact ``calc()`` expression (computed with `config.gutter`).
    """
    return _formatted(width_term, span_columns, config)


def compute_position(offset_columns: float, config: GridConfig) -> FormattedLength:
    """Compute the ``margin-left`` placing a cell `offset_columns` from the start.

    Same emission policy as `compute_width`, without the trailing gutter
    subtraction.
    """
    return _formatted(position_term, offset_columns, config)


def declare(name: str, length: FormattedLength) -> tuple[Declaration, ...]:
    """Expand a formatted length into declarations, fallback first."""
    return tuple(Declaration(name, value) for value in length.values)


def span_cell(
    width_columns: float, offset_columns: float, config: GridConfig
) -> tuple[Declaration, ...]:
    """Return the declarations isolating one cell at a given span and offset."""
    return (
        *ISOLATION,
        *declare("width", compute_width(width_columns, config)),
        *declare("margin-left", compute_position(offset_columns, config)),
    )


def distribute_equal_width(
    cells_per_row: float, config: GridConfig
) -> RowDistribution:
    """Lay out equal-width cells, `cells_per_row` to a row.

    Each phase ``i`` (1-indexed) of the row gets its own ``nth-child`` rule
    placing it at ``columns / cells_per_row * (i - 1)``. Only phase 1 clears
    the floats of the previous row.

    Raises:
        InvalidLayoutError: If `cells_per_row` is not positive.
    """
    if not cells_per_row > 0:
        raise InvalidLayoutError(cells_per_row)
    columns_per_cell = config.columns / cells_per_row
    rules = tuple(
        ChildRule(
            pattern=NthChild(stride=cells_per_row, phase=phase),
            position=compute_position(columns_per_cell * (phase - 1), config),
            clear=phase == 1,
        )
        for phase in range(1, math.floor(cells_per_row) + 1)
    )
    return RowDistribution(compute_width(columns_per_cell, config), rules)
