"""Unit tests for isogrid.config."""

from isogrid import config
from isogrid.domain.value_objects import Dimension, GridConfig, Percentage

# pylint: disable=magic-value-comparison


def test_builtin_defaults():
    """12 columns, a 1rem gutter and a 2% fallback."""
    assert config.builtin_defaults() == GridConfig(
        12, Dimension(1.0, "rem"), Percentage(2.0)
    )


def test_env_var_names():
    """Each setting has an ISOGRID_-prefixed variable."""
    assert config.SETTING_ENV_VARS == {
        "columns": "ISOGRID_COLUMNS",
        "gutter": "ISOGRID_GUTTER",
        "gutter_fallback": "ISOGRID_GUTTER_FALLBACK",
    }


def test_get_env_settings_reads_set_variables():
    """Only variables that are set are returned, stripped and still textual."""
    environ = {
        "ISOGRID_COLUMNS": " 16 ",
        "ISOGRID_GUTTER": "2%",
        "UNRELATED": "x",
    }
    assert config.get_env_settings(environ) == {"columns": "16", "gutter": "2%"}


def test_get_env_settings_ignores_empty_values():
    """Empty or blank variables do not replace a default."""
    environ = {"ISOGRID_GUTTER": "", "ISOGRID_GUTTER_FALLBACK": "   "}
    assert not config.get_env_settings(environ)


def test_get_env_settings_defaults_to_os_environ(monkeypatch):
    """Without an explicit mapping the process environment is read."""
    monkeypatch.setenv("ISOGRID_GUTTER_FALLBACK", "3%")
    monkeypatch.delenv("ISOGRID_COLUMNS", raising=False)
    monkeypatch.delenv("ISOGRID_GUTTER", raising=False)
    assert config.get_env_settings() == {"gutter_fallback": "3%"}
