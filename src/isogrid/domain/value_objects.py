"""Module including value objects used across the domain layer."""

import math
import re
from dataclasses import dataclass, fields
from numbers import Real

from .errors import InvalidLengthError, InvalidSettingError, UnknownSettingError

# --- Lengths ---


@dataclass(frozen=True, slots=True)
class Percentage:
    """A length expressed as a percentage of the containing block (e.g. ``2%``)."""

    value: float


@dataclass(frozen=True, slots=True)
class Dimension:
    """A non-percentage length carrying an explicit unit (e.g. ``1rem``)."""

    value: float
    unit: str

    def __post_init__(self) -> None:
        if not self.unit or not self.unit.isalpha():
            raise InvalidLengthError(f"{self.value}{self.unit}")
        object.__setattr__(self, "unit", self.unit.lower())


type Length = Percentage | Dimension

_LENGTH_RE = re.compile(
    r"^\s*(?P<value>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"(?P<unit>%|[a-zA-Z]+)?\s*$"
)


def parse_length(text: str) -> Length:
    """Parse a CSS length such as ``"2%"``, ``"1.5rem"`` or ``"12px"``.

    Args:
        text: The length as written in a stylesheet.

    Returns:
        A `Percentage` for ``%`` values, otherwise a `Dimension`.

    Raises:
        InvalidLengthError: If the text is not a number followed by a unit.

    Note:
        A bare ``0`` is accepted and read as ``0%``; any other unitless number
        is rejected because it cannot be combined with ``100%``.
    """
    if (found := _LENGTH_RE.match(text)) is None:
        raise InvalidLengthError(text)
    value = float(found["value"])
    match found["unit"]:
        case "%":
            return Percentage(value)
        case None if value == 0:
            return Percentage(0.0)
        case None:
            raise InvalidLengthError(text)
        case unit:
            return Dimension(value, unit)


# --- Grid configuration ---


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Immutable grid settings used by every width/position computation.

    Conventions:
      - `columns` is the total number of columns, strictly positive.
      - `gutter` is the space between adjacent cells, in any unit.
      - `gutter_fallback` approximates `gutter` as a percentage for consumers
        that cannot evaluate ``calc()``.
    """

    columns: float
    gutter: Length
    gutter_fallback: Percentage

    def __post_init__(self) -> None:
        if (
            isinstance(self.columns, bool)
            or not isinstance(self.columns, Real)
            or not self.columns > 0
            or not math.isfinite(self.columns)
        ):
            raise InvalidSettingError(
                "columns", self.columns, "must be a positive finite number"
            )
        if not isinstance(self.gutter, (Percentage, Dimension)):
            raise InvalidSettingError("gutter", self.gutter, "must be a length")
        if not isinstance(self.gutter_fallback, Percentage):
            raise InvalidSettingError(
                "gutter_fallback", self.gutter_fallback, "must be a percentage"
            )


SETTING_KEYS: tuple[str, ...] = tuple(field.name for field in fields(GridConfig))


def coerce_setting(key: str, value: object) -> object:
    """Convert a raw setting value (e.g. text from the environment) to its type.

    Args:
        key: One of `SETTING_KEYS`.
        value: A typed value or its textual form (``"12"``, ``"1rem"``, ``"2%"``).

    Returns:
        The value converted for `key`. Typed values are returned unchanged;
        `GridConfig` performs the final invariant checks.

    Raises:
        UnknownSettingError: If `key` is not a grid setting.
        InvalidSettingError: If a textual column count is not a number.
        InvalidLengthError: If a textual gutter is not a length.
    """
    if key not in SETTING_KEYS:
        raise UnknownSettingError(key)
    if not isinstance(value, str):
        return value
    if key == "columns":
        try:
            number = float(value)
        except ValueError as e:
            raise InvalidSettingError(key, value, "must be a positive number") from e
        return int(number) if number.is_integer() else number
    return parse_length(value)
