"""
Adapter: konwersja JSON AST (contracts.ExprAST) ↔ drzewo Expression.

from_ast()    — buduje drzewo domenowe; każdy BinOpNode dostaje ŚWIEŻĄ
                instancję operatora (cached=True → osobny CachingOperator)
to_ast()      — serializuje drzewo (np. wynik częściowy) z powrotem do AST
to_outcome()  — EvaluationResult → EvalOutcome dla API/CLI

Głębokość drzewa jest sprawdzana przed budową: ewaluacja jest rekurencyjna,
więc zbyt głębokie drzewo wyczerpałoby stos interpretera.
"""
from __future__ import annotations

import logging
import math
from typing import Union

from adapters.binary_operator.arithmetic import operator_for_symbol
from adapters.binary_operator.caching_proxy import CachingOperator
from adapters.expression.nodes import BinaryOp, Constant, Expression, Negate, Variable
from contracts import (
    BinOpNode,
    EvalOutcome,
    EvaluationResult,
    ExprAST,
    Full,
    NumberNode,
    Partial,
    UnaryOpNode,
    VariableNode,
)

logger = logging.getLogger("partial_eval.ast_codec")


class ExpressionTooDeepError(ValueError):
    def __init__(self, depth: int, max_depth: int) -> None:
        super().__init__(f"Expression depth {depth} exceeds limit {max_depth}")
        self.depth = depth
        self.max_depth = max_depth


def ast_depth(ast: ExprAST) -> int:
    """Wysokość drzewa AST, liczona iteracyjnie (bez rekursji)."""
    deepest = 0
    stack: list[tuple[ExprAST, int]] = [(ast, 1)]
    while stack:
        node, level = stack.pop()
        deepest = max(deepest, level)
        if isinstance(node, BinOpNode):
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
        elif isinstance(node, UnaryOpNode):
            stack.append((node.operand, level + 1))
    return deepest


def from_ast(ast: ExprAST, max_depth: int | None = None) -> Expression:
    if max_depth is not None:
        depth = ast_depth(ast)
        if depth > max_depth:
            raise ExpressionTooDeepError(depth, max_depth)
    return _build(ast)


def _build(node: ExprAST) -> Expression:
    if isinstance(node, NumberNode):
        return Constant(node.value)

    if isinstance(node, VariableNode):
        return Variable(node.name)

    if isinstance(node, UnaryOpNode):
        return Negate(_build(node.operand))

    if isinstance(node, BinOpNode):
        operator = operator_for_symbol(node.op, cached=node.cached)
        return BinaryOp(_build(node.left), _build(node.right), operator)

    raise TypeError(f"Unknown AST node type: {type(node)}")


def to_ast(expression: Expression) -> ExprAST:
    if isinstance(expression, Constant):
        return NumberNode(value=expression.value)

    if isinstance(expression, Variable):
        return VariableNode(name=expression.name)

    if isinstance(expression, Negate):
        return UnaryOpNode(operand=to_ast(expression.inner))

    if isinstance(expression, BinaryOp):
        return BinOpNode(
            op=expression.operator.symbol(),
            cached=isinstance(expression.operator, CachingOperator),
            left=to_ast(expression.left),
            right=to_ast(expression.right),
        )

    raise TypeError(f"Unknown expression type: {type(expression)}")


def to_outcome(result: EvaluationResult) -> EvalOutcome:
    if isinstance(result, Full):
        return EvalOutcome(
            kind="full",
            value=_json_number(result.value),
            formatted=str(result),
        )

    if isinstance(result, Partial):
        unbound = sorted(result.expression.variables())
        logger.debug("Partial result, unbound variables: %s", unbound)
        return EvalOutcome(
            kind="partial",
            formatted=str(result),
            expression=to_ast(result.expression),
            unbound=unbound,
        )

    raise TypeError(f"Unknown evaluation result: {type(result)}")


def _json_number(value: float) -> Union[float, str]:
    """JSON nie ma inf/nan — zwracamy je jako tekst ('inf', '-inf', 'nan')."""
    if math.isfinite(value):
        return value
    if math.isnan(value):
        return "nan"
    return "inf" if value > 0 else "-inf"
