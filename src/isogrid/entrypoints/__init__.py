"""Entrypoints (inbound adapters) for isogrid.

Expose the library to the outside world: currently the ``isogrid`` CLI. Parse
and validate inputs, call service-layer functions, and present results.

Dependency rule: may import `isogrid.service_layer` and `isogrid.bootstrap`;
avoid importing `isogrid.adapters` directly.
"""
