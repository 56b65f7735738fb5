"""CSS serializer for computed grid values.

Turns domain values (lengths, ``calc()`` expression trees, declarations and
row distributions) into stylesheet text. Pure formatting only; no arithmetic
is performed here.
"""

from collections.abc import Iterable

from isogrid.domain.expressions import BinaryOp, Calc, Operator, Term, Value
from isogrid.domain.grid import Declaration, NthChild, RowDistribution
from isogrid.domain.value_objects import Dimension, Percentage

DEFAULT_PRECISION = 10  # pragma: no mutate
DEFAULT_INDENT = "  "  # pragma: no mutate

_PRECEDENCE = {
    Operator.ADD: 1,
    Operator.SUBTRACT: 1,
    Operator.MULTIPLY: 2,
}


class CssSerializer:
    """Render grid values as CSS.

    Args:
        precision: Maximum number of decimal places written for a number.
            Trailing zeros are always trimmed.
        indent: Indentation used for declarations inside a rule.
    """

    def __init__(
        self, precision: int = DEFAULT_PRECISION, indent: str = DEFAULT_INDENT
    ) -> None:
        self.precision = precision
        self.indent = indent

    # --- Scalars ---

    def number(self, value: float) -> str:
        """Format a number with at most `precision` decimals (``-0`` becomes ``0``)."""
        text = f"{value:.{self.precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return "0" if text in {"-0", ""} else text

    def value(self, value: str | Value | float) -> str:
        """Format a declaration value.

        Strings are keywords (``left``, ``both``) and are written as is.
        """
        match value:
            case str():
                return value
            case Percentage(value=number):
                return f"{self.number(number)}%"
            case Dimension(value=number, unit=unit):
                return f"{self.number(number)}{unit}"
            case Calc(term=term):
                return f"calc({self.term(term)})"
            case _:
                return self.number(value)

    def term(self, term: Term) -> str:
        """Format an expression tree with the minimal parentheses needed."""
        if not isinstance(term, BinaryOp):
            return self.value(term)
        left = self._operand(term.left, term.operator, is_right=False)
        right = self._operand(term.right, term.operator, is_right=True)
        return f"{left} {term.operator.value} {right}"

    def _operand(self, term: Term, parent: Operator, is_right: bool) -> str:
        text = self.term(term)
        if not isinstance(term, BinaryOp):
            return text
        child, outer = _PRECEDENCE[term.operator], _PRECEDENCE[parent]
        if child < outer or (
            child == outer and is_right and parent is Operator.SUBTRACT
        ):
            return f"({text})"
        return text

    # --- Declarations & rules ---

    def declaration(self, declaration: Declaration) -> str:
        """Format ``name: value;``."""
        return f"{declaration.name}: {self.value(declaration.value)};"

    def rule(self, selector: str, declarations: Iterable[Declaration]) -> str:
        """Format one rule block, preserving declaration order."""
        body = "".join(
            f"{self.indent}{self.declaration(declaration)}\n"
            for declaration in declarations
        )
        return f"{selector} {{\n{body}}}\n"

    def nth_child(self, pattern: NthChild) -> str:
        """Format the ``:nth-child()`` pseudo-class of a row phase."""
        return f":nth-child({self.number(pattern.stride)}n + {pattern.phase})"

    def row(self, selector: str, distribution: RowDistribution) -> str:
        """Format a row distribution: one shared rule plus one rule per phase."""
        rules = [self.rule(selector, distribution.cell_declarations())]
        rules.extend(
            self.rule(
                f"{selector}{self.nth_child(rule.pattern)}", rule.declarations()
            )
            for rule in distribution.rules
        )
        return "".join(rules)
