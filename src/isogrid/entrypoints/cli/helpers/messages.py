"""Terminal message helpers for the isogrid CLI.

Messages are written to **stderr** so that stdout carries nothing but the
generated CSS and can be redirected straight into a stylesheet.
"""

import click

# kind -> (emoji, ASCII fallback, colour)
_STYLES = {
    "warn": ("⚠️", "[!]", "yellow"),
    "success": ("✅", "[OK]", "green"),
    "error": ("❌", "[X]", "red"),
}


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on the current stderr stream."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    try:
        character.encode(getattr(stream, "encoding"))
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the emoji marker for `kind`, or its ASCII fallback.

    Args:
        kind: One of ``"warn"``, ``"success"`` or ``"error"``.
    """
    emoji, fallback, _ = _STYLES[kind]
    return emoji if _supports_character(emoji) else fallback


def _emit(kind: str, msg: str) -> None:
    click.secho(f"{glyph(kind)}  {msg}", fg=_STYLES[kind][2], bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    _emit("warn", msg)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    _emit("success", msg)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    _emit("error", msg)
