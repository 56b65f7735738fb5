"""Unit tests for isogrid.bootstrap."""

import pytest

from isogrid.adapters.css import CssSerializer
from isogrid.adapters.settings import InMemorySettingsProvider
from isogrid.bootstrap import AppContainer, bootstrap, build_settings_provider
from isogrid.domain.errors import InvalidLengthError, InvalidSettingError
from isogrid.domain.value_objects import Dimension, GridConfig, Percentage

# pylint: disable=magic-value-comparison


def test_provider_holds_builtin_defaults():
    """An empty environment leaves the built-in defaults."""
    provider = build_settings_provider({})
    assert isinstance(provider, InMemorySettingsProvider)
    assert provider.snapshot() == GridConfig(
        12, Dimension(1.0, "rem"), Percentage(2.0)
    )


def test_environment_replaces_defaults():
    """ISOGRID_* variables seed the provider."""
    provider = build_settings_provider(
        {"ISOGRID_COLUMNS": "16", "ISOGRID_GUTTER": "1.5em"}
    )
    assert provider.snapshot() == GridConfig(
        16, Dimension(1.5, "em"), Percentage(2.0)
    )


@pytest.mark.parametrize(
    ("environ", "error"),
    [
        ({"ISOGRID_COLUMNS": "-4"}, InvalidSettingError),
        ({"ISOGRID_COLUMNS": "inf"}, InvalidSettingError),
        ({"ISOGRID_COLUMNS": "1e400"}, InvalidSettingError),
        ({"ISOGRID_GUTTER": "1 rem"}, InvalidLengthError),
        ({"ISOGRID_GUTTER": "wide"}, InvalidLengthError),
        ({"ISOGRID_GUTTER_FALLBACK": "1rem"}, InvalidSettingError),
    ],
)
def test_invalid_environment_fails(environ, error):
    """Invalid environment defaults are reported, not silently ignored."""
    with pytest.raises(error):
        build_settings_provider(environ)


def test_bootstrap_container():
    """The container wires a provider and a serializer."""
    container = bootstrap({}, precision=4)
    assert isinstance(container, AppContainer)
    assert isinstance(container.serializer, CssSerializer)
    assert container.serializer.precision == 4
    assert container.settings.get("columns") == 12
