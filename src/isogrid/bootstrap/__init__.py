"""Bootstrap (composition root) for isogrid.

Assembles the application at runtime: builds the default-settings provider
from the built-in defaults and the environment, and pairs it with the CSS
serializer used by entrypoints.

Import rules:
- Entry points import *this* package (not adapters/interfaces/domain wiring).
- This package may import: `isogrid.adapters`, `isogrid.service_layer`,
  `isogrid.interfaces`, `isogrid.domain`, and `isogrid.config`.
- Inner layers must not import `isogrid.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_settings_provider

__all__ = ["AppContainer", "bootstrap", "build_settings_provider"]
