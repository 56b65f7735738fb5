"""The ``isogrid`` command-line interface."""
