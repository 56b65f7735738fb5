"""Service layer for isogrid.

Implements the application use-cases: resolve the effective grid settings for
a call (overrides first, then the defaults provider) and run the pure domain
formulas with them.

Dependency rule: may import `isogrid.domain` and `isogrid.interfaces`, but not
`isogrid.adapters` or `isogrid.entrypoints`.
"""
