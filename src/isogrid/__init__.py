"""isogrid

Build-time formulas for isolation-based float grids: compute the CSS widths
and margins of grid cells from a column count and a gutter, with percentage
fallbacks for consumers that cannot evaluate ``calc()``.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
