"""In-memory settings provider."""

import logging
import threading
from dataclasses import replace

from isogrid.domain.errors import UnknownSettingError
from isogrid.domain.value_objects import SETTING_KEYS, GridConfig, coerce_setting
from isogrid.interfaces.settings import SettingsProvider

logger = logging.getLogger(__name__)


class InMemorySettingsProvider(SettingsProvider):
    """Settings provider keeping the defaults as one immutable `GridConfig`.

    Every `set_default` builds a complete new `GridConfig` (which re-checks all
    invariants) and swaps it in under a lock, so a failed update leaves the
    previous defaults in place and readers never observe a half-applied
    change.
    """

    def __init__(self, defaults: GridConfig) -> None:
        self._config = defaults
        self._lock = threading.Lock()

    def get(self, key: str) -> object:
        """Get the default value of a setting.

        Args:
            key: One of `SETTING_KEYS`.

        Returns:
            The current default value.

        Raises:
            UnknownSettingError: If `key` is not a grid setting.
        """
        if key not in SETTING_KEYS:
            raise UnknownSettingError(key)
        return getattr(self.snapshot(), key)

    def set_default(self, key: str, value: object) -> None:
        """Replace the default value of an existing setting.

        Args:
            key: One of `SETTING_KEYS`.
            value: The new value, typed or textual.

        Raises:
            UnknownSettingError: If `key` is not a grid setting.
            InvalidSettingError: If the value violates a `GridConfig` invariant.
        """
        coerced = coerce_setting(key, value)
        with self._lock:
            updated = replace(self._config, **{key: coerced})
            logger.debug(
                "Default %s: %r -> %r", key, getattr(self._config, key), coerced
            )
            self._config = updated

    def snapshot(self) -> GridConfig:
        """Return the current defaults as one immutable `GridConfig`."""
        with self._lock:
            return self._config
