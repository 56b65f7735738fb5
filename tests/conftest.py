"""Global pytest fixtures for isogrid."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from isogrid import config
from isogrid.adapters.css import CssSerializer
from isogrid.adapters.settings import InMemorySettingsProvider
from isogrid.domain.value_objects import Dimension, GridConfig, Length, Percentage

# pylint: disable=redefined-outer-name, unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# first-level test folder -> default marker
DEFAULT_MARKERS = {"unit": "unit", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every test with the name of its first-level folder (`unit`, `e2e`)."""
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if (marker := DEFAULT_MARKERS.get(folder)) is None:
            continue
        if not any(mark.name == marker for mark in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker))


@pytest.fixture
def make_config() -> Callable[..., GridConfig]:
    """Factory fixture: a `GridConfig` with built-in defaults plus overrides.

    Example:
        ```py
        def test_something(make_config):
            cfg = make_config(gutter=Percentage(2.0))
        ```
    """

    def _make_config(
        columns: float = config.DEFAULT_COLUMNS,
        gutter: Length = config.DEFAULT_GUTTER,
        gutter_fallback: Percentage = config.DEFAULT_GUTTER_FALLBACK,
    ) -> GridConfig:
        return GridConfig(
            columns=columns, gutter=gutter, gutter_fallback=gutter_fallback
        )

    return _make_config


@pytest.fixture
def percent_config(make_config) -> GridConfig:
    """12 columns with a 2% gutter."""
    return make_config(gutter=Percentage(2.0))


@pytest.fixture
def rem_config(make_config) -> GridConfig:
    """12 columns with a 1rem gutter and a 2% fallback."""
    return make_config(gutter=Dimension(1.0, "rem"), gutter_fallback=Percentage(2.0))


@pytest.fixture
def provider() -> InMemorySettingsProvider:
    """A fresh settings provider holding the built-in defaults."""
    return InMemorySettingsProvider(config.builtin_defaults())


@pytest.fixture
def serializer() -> CssSerializer:
    """A CSS serializer with default precision."""
    return CssSerializer()
