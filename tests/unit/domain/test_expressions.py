"""Unit tests for isogrid.domain.expressions."""

import pytest

from isogrid.domain.errors import IncompatibleUnitsError
from isogrid.domain.expressions import (
    BinaryOp,
    Calc,
    FormattedLength,
    Operator,
    add,
    evaluate,
    multiply,
    subtract,
)
from isogrid.domain.value_objects import Dimension, Percentage

# pylint: disable=magic-value-comparison


class TestBuilders:
    """Tests for the add/subtract/multiply builders."""

    @staticmethod
    def test_builders_produce_nodes():
        """Each builder wraps its operands in a BinaryOp with the right operator."""
        a, b = Percentage(1.0), Percentage(2.0)
        assert add(a, b) == BinaryOp(Operator.ADD, a, b)
        assert subtract(a, b) == BinaryOp(Operator.SUBTRACT, a, b)
        assert multiply(a, 3) == BinaryOp(Operator.MULTIPLY, a, 3)


class TestEvaluate:
    """Tests for evaluate."""

    @staticmethod
    def test_leaf_is_returned_unchanged():
        """A bare length evaluates to itself."""
        assert evaluate(Percentage(5.0)) == Percentage(5.0)

    @staticmethod
    def test_percentage_arithmetic():
        """(100% + 2%) * 0.5 - 2% == 49%."""
        gutter = Percentage(2.0)
        term = subtract(multiply(add(Percentage(100.0), gutter), 0.5), gutter)
        assert evaluate(term) == Percentage(49.0)

    @staticmethod
    def test_scalar_on_the_left():
        """Multiplication is commutative for number * length."""
        assert evaluate(multiply(0.25, Percentage(102.0))) == Percentage(25.5)

    @staticmethod
    def test_plain_numbers():
        """Expressions without lengths reduce to a number."""
        assert evaluate(subtract(multiply(2, 3), 1)) == 5

    @staticmethod
    def test_same_unit_dimensions():
        """Dimensions with the same unit can be added at build time."""
        assert evaluate(add(Dimension(1.0, "rem"), Dimension(0.5, "rem"))) == Dimension(
            1.5, "rem"
        )

    @staticmethod
    @pytest.mark.parametrize(
        "term",
        [
            add(Percentage(100.0), Dimension(1.0, "rem")),
            subtract(Dimension(1.0, "px"), Dimension(1.0, "rem")),
            add(Percentage(1.0), 2),
            multiply(Percentage(1.0), Percentage(2.0)),
        ],
    )
    def test_mixed_units_are_rejected(term):
        """Terms that only the renderer could resolve raise IncompatibleUnitsError."""
        with pytest.raises(IncompatibleUnitsError):
            evaluate(term)

    @staticmethod
    def test_error_describes_operands():
        """The error names both operands in CSS notation."""
        with pytest.raises(IncompatibleUnitsError) as excinfo:
            evaluate(add(Percentage(100.0), Dimension(1.0, "rem")))
        assert (excinfo.value.left, excinfo.value.right) == ("100%", "1rem")


class TestFormattedLength:
    """Tests for FormattedLength."""

    @staticmethod
    def test_single_value():
        """Without an expression only the fallback is emitted."""
        assert FormattedLength(Percentage(49.0)).values == (Percentage(49.0),)

    @staticmethod
    def test_fallback_precedes_expression():
        """With an expression the fallback is emitted first."""
        calc = Calc(add(Percentage(100.0), Dimension(1.0, "rem")))
        length = FormattedLength(Percentage(51.0), calc)
        assert length.values == (Percentage(51.0), calc)
