"""Parsing of ``-L NAME=LEVEL`` logger-level options.

Values arrive either as a tuple (repeated flags) or as one string (from the
environment) whose items are separated by commas and/or whitespace. Levels
are standard logging level names, case-insensitive, or plain integers.
"""

import logging
import re

import click

# Libraries that are chatty at DEBUG unless told otherwise
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten raw option value(s) into individual ``NAME=LEVEL`` items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def level_from_name(text: str) -> int:
    """Convert ``"info"``, ``"WARNING"`` or ``"15"`` to a numeric logging level.

    Raises:
        click.BadParameter: If the text is neither a level name nor an integer.
    """
    text = text.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelNamesMapping().get(text.upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {text}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name->level dict.

    The result starts from `DEFAULT_LIB_LEVELS`; later items override earlier
    ones for the same logger name.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in split_items(value):
        name, sep, level_text = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = level_from_name(level_text)
    return levels
