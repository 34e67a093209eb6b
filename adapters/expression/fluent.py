"""
Funkcje wolne do budowania drzew bez łańcuchowania metod.

    expr = multiply(add(variable("x"), 1), negate(variable("y")))

Odpowiadają metodom węzłów 1:1; multiply() opakowuje operator w CachingOperator.
"""
from __future__ import annotations

from adapters.expression.nodes import (
    BinaryOp,
    Constant,
    Expression,
    Negate,
    Operand,
    Variable,
    _as_expression,
)


def constant(value: float) -> Constant:
    return Constant(value)


def variable(name: str) -> Variable:
    return Variable(name)


def add(left: Operand, right: Operand) -> BinaryOp:
    return _as_expression(left).add(right)


def subtract(left: Operand, right: Operand) -> BinaryOp:
    return _as_expression(left).subtract(right)


def multiply(left: Operand, right: Operand) -> BinaryOp:
    return _as_expression(left).multiply(right)


def divide(left: Operand, right: Operand) -> BinaryOp:
    return _as_expression(left).divide(right)


def negate(expression: Expression) -> Negate:
    return Negate(expression)
