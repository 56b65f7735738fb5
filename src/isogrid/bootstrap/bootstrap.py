"""Bootstrap the settings provider and serializer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from isogrid import config
from isogrid.adapters.css import DEFAULT_PRECISION, CssSerializer
from isogrid.adapters.settings import InMemorySettingsProvider
from isogrid.interfaces.settings import SettingsProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    settings: SettingsProvider
    serializer: CssSerializer


def build_settings_provider(
    environ: Mapping[str, str] | None = None,
) -> SettingsProvider:
    """Build a settings provider seeded with built-in and environment defaults.

    Raises:
        InvalidSettingError: If an environment value violates a grid invariant.
        InvalidLengthError: If an environment gutter is not a length.
    """
    provider = InMemorySettingsProvider(config.builtin_defaults())
    for key, value in config.get_env_settings(environ).items():
        logger.debug("Default %s taken from the environment: %s", key, value)
        provider.set_default(key, value)
    return provider


def bootstrap(
    environ: Mapping[str, str] | None = None,
    precision: int = DEFAULT_PRECISION,
) -> AppContainer:
    """Compose the application objects used by entrypoints."""
    return AppContainer(
        settings=build_settings_provider(environ),
        serializer=CssSerializer(precision=precision),
    )
