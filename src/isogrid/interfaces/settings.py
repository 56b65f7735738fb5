"""Interface for the provider of default grid settings.

The provider is the only long-lived mutable state of the library: it holds the
default `GridConfig` used whenever a call does not override a setting. It is
injected into the service layer rather than accessed as a global, so formula
code stays pure and tests can use their own instance.
"""

import abc
from collections.abc import Mapping

from isogrid.domain.errors import UnknownSettingError
from isogrid.domain.value_objects import SETTING_KEYS, GridConfig, coerce_setting

type Overrides = Mapping[str, object]


class SettingsProvider(abc.ABC):
    """Contract for a store of default grid settings."""

    @abc.abstractmethod
    def get(self, key: str) -> object:
        """Get the default value of a setting.

        Args:
            key: One of `SETTING_KEYS`.

        Returns:
            The current default value.

        Raises:
            UnknownSettingError: If `key` is not a grid setting.
        """

    @abc.abstractmethod
    def set_default(self, key: str, value: object) -> None:
        """Replace the default value of an existing setting.

        Args:
            key: One of `SETTING_KEYS`.
            value: The new value, typed or textual (see `coerce_setting`).

        Raises:
            UnknownSettingError: If `key` is not a grid setting.
            InvalidSettingError: If the value violates a `GridConfig` invariant.

        Note:
            On failure the stored defaults must be left unchanged.
        """

    @abc.abstractmethod
    def snapshot(self) -> GridConfig:
        """Return the current defaults as one immutable `GridConfig`."""


def _check_keys(overrides: Overrides) -> None:
    for key in overrides:
        if key not in SETTING_KEYS:
            raise UnknownSettingError(key)


def resolve(
    key: str, overrides: Overrides | None, provider: SettingsProvider
) -> object:
    """Resolve one setting: the call-site override if present, else the default.

    The override is validated together with the other settings, so this agrees
    with `resolve_config` on what is accepted.

    Raises:
        UnknownSettingError: If `key` (or any override key) is not a grid setting.
        InvalidSettingError: If the merged settings violate a `GridConfig`
            invariant.
    """
    if key not in SETTING_KEYS:
        raise UnknownSettingError(key)
    return getattr(resolve_config(overrides, provider), key)


def resolve_config(
    overrides: Overrides | None, provider: SettingsProvider
) -> GridConfig:
    """Merge a flat override map onto the provider's defaults, key by key.

    Raises:
        UnknownSettingError: If an override key is not a grid setting.
        InvalidSettingError: If the merged settings violate a `GridConfig`
            invariant.
    """
    overrides = overrides or {}
    _check_keys(overrides)
    if not overrides:
        return provider.snapshot()
    defaults = provider.snapshot()
    merged = {
        key: coerce_setting(key, overrides[key])
        if key in overrides
        else getattr(defaults, key)
        for key in SETTING_KEYS
    }
    return GridConfig(**merged)  # type: ignore[arg-type]
