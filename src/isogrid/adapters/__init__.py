"""Adapters (infrastructure) for isogrid.

Provide concrete implementations of the application contracts (e.g., the
in-memory settings provider) and outbound formatting (the CSS serializer).

Dependency rule: may import `isogrid.domain` and `isogrid.interfaces`; the
domain must not import this package.
"""
