"""CLI helpers for isogrid.

Utilities used by the command-line interface: click parameter types for grid
lengths, logger-level parsing, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .messages import error, success, warn
from .param_types import LENGTH

__all__ = ["LENGTH", "error", "success", "warn"]
