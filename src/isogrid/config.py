"""Configuration utilities for isogrid.

This module centralizes the built-in grid defaults and the environment
variables that can replace them.
"""

import os
from collections.abc import Mapping

from isogrid.domain.value_objects import Dimension, GridConfig, Percentage

DEFAULT_COLUMNS = 12
DEFAULT_GUTTER = Dimension(1.0, "rem")
DEFAULT_GUTTER_FALLBACK = Percentage(2.0)

ENV_PREFIX = "ISOGRID_"  # pragma: no mutate

# setting key -> environment variable
SETTING_ENV_VARS = {
    "columns": f"{ENV_PREFIX}COLUMNS",
    "gutter": f"{ENV_PREFIX}GUTTER",
    "gutter_fallback": f"{ENV_PREFIX}GUTTER_FALLBACK",
}


def builtin_defaults() -> GridConfig:
    """Return the grid defaults used when nothing else is configured.

    Returns:
        12 columns, a ``1rem`` gutter and a ``2%`` gutter fallback.
    """
    return GridConfig(
        columns=DEFAULT_COLUMNS,
        gutter=DEFAULT_GUTTER,
        gutter_fallback=DEFAULT_GUTTER_FALLBACK,
    )


def get_env_settings(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect default-setting overrides from the environment.

    Args:
        environ: Mapping to read from. Defaults to `os.environ`; pass a dict in
            tests.

    Returns:
        Raw (textual) values keyed by setting name, only for the variables that
        are set to a non-empty value. Conversion and validation happen when
        the values are applied to a settings provider.
    """
    environ = os.environ if environ is None else environ
    return {
        key: value
        for key, env_var in SETTING_ENV_VARS.items()
        if (value := environ.get(env_var, "").strip())
    }
