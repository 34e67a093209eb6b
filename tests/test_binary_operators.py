from __future__ import annotations

import math

import pytest

from adapters.binary_operator.arithmetic import (
    AddOperator,
    DivideOperator,
    MultiplyOperator,
    SubtractOperator,
    operator_for_symbol,
)
from adapters.binary_operator.caching_proxy import CachingOperator
from ports.binary_operator import BinaryOperator


@pytest.mark.parametrize(
    "operator, left, right, expected, symbol",
    [
        (AddOperator(), 2.0, 3.0, 5.0, "+"),
        (SubtractOperator(), 2.0, 3.0, -1.0, "-"),
        (MultiplyOperator(), 2.0, 3.0, 6.0, "*"),
        (DivideOperator(), 3.0, 2.0, 1.5, "/"),
    ],
)
def test_arithmetic_operators_apply_and_render_symbol(operator, left, right, expected, symbol):
    assert operator.apply(left, right) == expected
    assert operator.symbol() == symbol


def test_divide_by_zero_follows_ieee_semantics():
    divide = DivideOperator()

    assert divide.apply(1.0, 0.0) == math.inf
    assert divide.apply(-1.0, 0.0) == -math.inf
    assert divide.apply(1.0, -0.0) == -math.inf
    assert math.isnan(divide.apply(0.0, 0.0))
    assert math.isnan(divide.apply(math.nan, 0.0))


def test_operators_compare_equal_by_type():
    assert AddOperator() == AddOperator()
    assert AddOperator() != SubtractOperator()


def test_operators_satisfy_binary_operator_protocol():
    assert isinstance(AddOperator(), BinaryOperator)
    assert isinstance(CachingOperator(MultiplyOperator()), BinaryOperator)


def test_operator_for_symbol_returns_fresh_instances():
    first = operator_for_symbol("*", cached=True)
    second = operator_for_symbol("*", cached=True)

    assert isinstance(first, CachingOperator)
    assert first is not second
    assert operator_for_symbol("/") == DivideOperator()


def test_operator_for_symbol_rejects_unknown_symbol():
    with pytest.raises(ValueError, match="Unknown operator"):
        operator_for_symbol("^")
