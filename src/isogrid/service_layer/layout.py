"""Grid layout use-cases.

Each function resolves the effective `GridConfig` for the call (per-call
overrides merged onto the provider's defaults) and delegates to the pure
formulas in `isogrid.domain.grid`.
"""

import logging

from isogrid.domain import grid
from isogrid.domain.expressions import FormattedLength
from isogrid.interfaces.settings import Overrides, SettingsProvider, resolve_config

logger = logging.getLogger(__name__)


def compute_width(
    span_columns: float,
    overrides: Overrides | None = None,
    *,
    provider: SettingsProvider,
) -> FormattedLength:
    """Compute the width of a cell spanning `span_columns` columns."""
    config = resolve_config(overrides, provider)
    result = grid.compute_width(span_columns, config)
    logger.debug("Width of %s column(s) with %s: %s", span_columns, config, result)
    return result


def compute_position(
    offset_columns: float,
    overrides: Overrides | None = None,
    *,
    provider: SettingsProvider,
) -> FormattedLength:
    """Compute the margin-left of a cell offset by `offset_columns` columns."""
    config = resolve_config(overrides, provider)
    result = grid.compute_position(offset_columns, config)
    logger.debug(
        "Position at %s column(s) with %s: %s", offset_columns, config, result
    )
    return result


def span_cell(
    width_columns: float,
    offset_columns: float = 0,
    overrides: Overrides | None = None,
    *,
    provider: SettingsProvider,
) -> tuple[grid.Declaration, ...]:
    """Return the isolation declarations for one cell."""
    config = resolve_config(overrides, provider)
    logger.debug(
        "Span %s column(s) at %s with %s", width_columns, offset_columns, config
    )
    return grid.span_cell(width_columns, offset_columns, config)


def distribute_equal_width(
    cells_per_row: float,
    overrides: Overrides | None = None,
    *,
    provider: SettingsProvider,
) -> grid.RowDistribution:
    """Distribute equal-width cells, `cells_per_row` to a row."""
    config = resolve_config(overrides, provider)
    logger.debug("Distribute %s cell(s) per row with %s", cells_per_row, config)
    return grid.distribute_equal_width(cells_per_row, config)
