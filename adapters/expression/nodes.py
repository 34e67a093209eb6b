"""
Adapter: węzły drzewa wyrażenia (Constant, Variable, BinaryOp, Negate)
Implementuje port Expression — rekurencyjna częściowa ewaluacja.

Węzły są niemutowalne (frozen dataclass). Częściowa ewaluacja buduje nowe
węzły, niezmienione poddrzewa są współdzielone, nie kopiowane.

Reguły łączenia wyników w BinaryOp:
  (Full, Full)       → Full(op.apply(l, r))
  (Full, Partial)    → Partial(BinaryOp(Constant(l), r', op))
  (Partial, Full)    → Partial(BinaryOp(l', Constant(r), op))
  (Partial, Partial) → Partial(BinaryOp(l', r', op))
Ta sama instancja operatora (razem z ewentualnym cache) trafia do wyniku.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from adapters.binary_operator.arithmetic import (
    AddOperator,
    DivideOperator,
    MultiplyOperator,
    SubtractOperator,
)
from adapters.binary_operator.caching_proxy import CachingOperator
from contracts import (
    EvaluationResult,
    Found,
    Full,
    NotFound,
    Partial,
    UnreachableCombinationError,
    float_bits,
    format_number,
)
from ports.binary_operator import BinaryOperator
from ports.evaluation_context import EvaluationContext


class _FluentExpression:
    """Wspólny cukier składniowy: x.add(1).multiply(y).negate()."""

    def add(self, other: Operand) -> BinaryOp:
        return BinaryOp(self, _as_expression(other), AddOperator())

    def subtract(self, other: Operand) -> BinaryOp:
        return BinaryOp(self, _as_expression(other), SubtractOperator())

    def multiply(self, other: Operand) -> BinaryOp:
        # Konwencja: mnożenie zawsze przez proxy z cache
        return BinaryOp(self, _as_expression(other), CachingOperator(MultiplyOperator()))

    def divide(self, other: Operand) -> BinaryOp:
        return BinaryOp(self, _as_expression(other), DivideOperator())

    def negate(self) -> Negate:
        return Negate(self)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, eq=False)
class Constant(_FluentExpression):
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constant):
            return NotImplemented
        return float_bits(self.value) == float_bits(other.value)

    def __hash__(self) -> int:
        return hash(float_bits(self.value))

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        return Full(self.value)

    def format(self) -> str:
        return format_number(self.value)

    def depth(self) -> int:
        return 1

    def variables(self) -> frozenset[str]:
        return frozenset()


@dataclass(frozen=True)
class Variable(_FluentExpression):
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Variable name must not be empty")

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        resolution = context.resolve(self.name)
        if isinstance(resolution, Found):
            return Full(resolution.value)
        if isinstance(resolution, NotFound):
            return Partial(self)
        raise UnreachableCombinationError(
            f"Unknown variable resolution: {type(resolution).__name__}"
        )

    def format(self) -> str:
        return self.name

    def depth(self) -> int:
        return 1

    def variables(self) -> frozenset[str]:
        return frozenset((self.name,))


@dataclass(frozen=True)
class Negate(_FluentExpression):
    inner: Expression

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        result = self.inner.evaluate(context)
        if isinstance(result, Full):
            return Full(-result.value)
        if isinstance(result, Partial):
            return Partial(Negate(result.expression))
        raise UnreachableCombinationError(
            f"Unknown evaluation result: {type(result).__name__}"
        )

    def format(self) -> str:
        return f"-{self.inner.format()}"

    def depth(self) -> int:
        return 1 + self.inner.depth()

    def variables(self) -> frozenset[str]:
        return self.inner.variables()


@dataclass(frozen=True)
class BinaryOp(_FluentExpression):
    left: Expression
    right: Expression
    operator: BinaryOperator

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        left = self.left.evaluate(context)
        right = self.right.evaluate(context)

        if isinstance(left, Full) and isinstance(right, Full):
            return Full(self.operator.apply(left.value, right.value))
        if isinstance(left, Full) and isinstance(right, Partial):
            return Partial(BinaryOp(Constant(left.value), right.expression, self.operator))
        if isinstance(left, Partial) and isinstance(right, Full):
            return Partial(BinaryOp(left.expression, Constant(right.value), self.operator))
        if isinstance(left, Partial) and isinstance(right, Partial):
            return Partial(BinaryOp(left.expression, right.expression, self.operator))

        raise UnreachableCombinationError(
            f"Unhandled result combination: ({type(left).__name__}, {type(right).__name__})"
        )

    def format(self) -> str:
        return f"({self.left.format()} {self.operator.symbol()} {self.right.format()})"

    def depth(self) -> int:
        return 1 + max(self.left.depth(), self.right.depth())

    def variables(self) -> frozenset[str]:
        return self.left.variables() | self.right.variables()


Expression = Union[Constant, Variable, BinaryOp, Negate]
Operand = Union[Expression, int, float]


def _as_expression(value: Operand) -> Expression:
    if isinstance(value, bool):
        raise TypeError("bool is not a valid operand")
    if isinstance(value, (int, float)):
        return Constant(value)
    return value
