"""Domain layer for isogrid.

Contains the grid rules: lengths, the grid configuration value object,
deferred ``calc()`` expressions, and the pure width/position formulas of the
isolation grid. This package is deliberately technology-agnostic.

Dependency rule: do not import from `isogrid.adapters` or `isogrid.entrypoints`.
"""
