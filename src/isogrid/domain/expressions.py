"""Deferred arithmetic over lengths.

A grid length is built as a small expression tree (``(100% + gutter) *
fraction - gutter``). When every length in the tree is a percentage the tree
is evaluated here, at build time, into a single `Percentage`. When the tree
mixes a percentage with another unit it cannot be reduced, so it is wrapped
in a `Calc` and left for the consuming renderer to evaluate at layout time.

Formatting expressions as text is the job of the CSS serializer
(`isogrid.adapters.css`), not of this module.
"""

from dataclasses import dataclass, replace
from enum import Enum

from .errors import IncompatibleUnitsError
from .value_objects import Dimension, Length, Percentage


class Operator(Enum):
    """Arithmetic operators allowed inside a ``calc()`` expression."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"


type Term = Percentage | Dimension | float | BinaryOp


@dataclass(frozen=True, slots=True)
class BinaryOp:
    """An arithmetic node combining two terms."""

    operator: Operator
    left: Term
    right: Term


@dataclass(frozen=True, slots=True)
class Calc:
    """An expression the consumer must evaluate at layout time."""

    term: Term


type Value = Percentage | Dimension | Calc


@dataclass(frozen=True, slots=True)
class FormattedLength:
    """A computed length ready to be emitted as one or two declarations.

    `fallback` is always a plain percentage. `expression` is set only when the
    exact value needs ``calc()``; it must be emitted *after* the fallback so
    that consumers understanding ``calc()`` override it.
    """

    fallback: Percentage
    expression: Calc | None = None

    @property
    def values(self) -> tuple[Value, ...]:
        """Values in emission order (fallback first)."""
        if self.expression is None:
            return (self.fallback,)
        return (self.fallback, self.expression)


def add(left: Term, right: Term) -> BinaryOp:
    """Build ``left + right``."""
    return BinaryOp(Operator.ADD, left, right)


def subtract(left: Term, right: Term) -> BinaryOp:
    """Build ``left - right``."""
    return BinaryOp(Operator.SUBTRACT, left, right)


def multiply(left: Term, right: Term) -> BinaryOp:
    """Build ``left * right``."""
    return BinaryOp(Operator.MULTIPLY, left, right)


def evaluate(term: Term) -> Length | float:
    """Reduce an expression tree to a single length or number.

    Args:
        term: The expression to evaluate.

    Returns:
        A `Percentage` or `Dimension` when the tree contains lengths,
        otherwise a plain number.

    Raises:
        IncompatibleUnitsError: If the tree adds/subtracts lengths of different
            units (e.g. ``100% + 1rem``) or multiplies two lengths.
    """
    match term:
        case BinaryOp(operator=operator, left=left, right=right):
            return _apply(operator, evaluate(left), evaluate(right))
        case _:
            return term


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _describe(value: Length | float) -> str:
    match value:
        case Percentage(value=number):
            return f"{number:g}%"
        case Dimension(value=number, unit=unit):
            return f"{number:g}{unit}"
        case _:
            return f"{value:g}"


def _apply(
    operator: Operator, left: Length | float, right: Length | float
) -> Length | float:
    if operator is Operator.MULTIPLY:
        if _is_number(left) and _is_number(right):
            return left * right  # type: ignore[operator]
        if _is_number(right) and not _is_number(left):
            return replace(left, value=left.value * right)  # type: ignore[union-attr,arg-type]
        if _is_number(left) and not _is_number(right):
            return replace(right, value=left * right.value)  # type: ignore[union-attr,operator]
        raise IncompatibleUnitsError(_describe(left), _describe(right))

    sign = 1 if operator is Operator.ADD else -1
    if _is_number(left) and _is_number(right):
        return left + sign * right  # type: ignore[operator]
    match left, right:
        case Percentage(), Percentage():
            return Percentage(left.value + sign * right.value)
        case Dimension(unit=unit), Dimension() if unit == right.unit:
            return Dimension(left.value + sign * right.value, unit)
    raise IncompatibleUnitsError(_describe(left), _describe(right))
