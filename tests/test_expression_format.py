from __future__ import annotations

import math

import pytest

from adapters.binary_operator.arithmetic import SubtractOperator
from adapters.expression.fluent import add, constant, divide, multiply, negate, subtract, variable
from adapters.expression.nodes import BinaryOp, Constant, Negate, Variable
from contracts import format_number


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.0, "2"),
        (2.5, "2.5"),
        (-3.0, "-3"),
        (-0.0, "-0"),
        (1e16, "1e+16"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "nan"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_is_structural():
    expression = BinaryOp(
        Negate(Variable("x")),
        BinaryOp(Constant(1), Variable("y"), SubtractOperator()),
        SubtractOperator(),
    )

    assert expression.format() == "(-x - (1 - y))"
    assert str(expression) == expression.format()


def test_fluent_methods_build_expected_tree():
    expression = Variable("x").add(1).multiply(Variable("y").negate())

    assert expression.format() == "((x + 1) * -y)"


def test_free_functions_match_methods():
    built = multiply(add(variable("x"), 1), negate(variable("y")))

    assert built == Variable("x").add(Constant(1)).multiply(Variable("y").negate())
    assert subtract(2, variable("a")).format() == "(2 - a)"
    assert divide(constant(1), 4).format() == "(1 / 4)"


def test_variables_and_depth():
    expression = Variable("x").add(Variable("y").negate()).multiply(Variable("x"))

    assert expression.variables() == frozenset({"x", "y"})
    assert expression.depth() == 4
    assert Constant(1).depth() == 1


def test_bool_operand_is_rejected():
    with pytest.raises(TypeError):
        Variable("x").add(True)


def test_empty_variable_name_is_rejected():
    with pytest.raises(ValueError):
        Variable("")


def test_nodes_satisfy_expression_protocol():
    from adapters.expression import BinaryOp as PublicBinaryOp
    from ports.expression import Expression

    assert PublicBinaryOp is BinaryOp
    for node in (Constant(1), Variable("x"), Negate(Variable("x")), Variable("x").add(1)):
        assert isinstance(node, Expression)
