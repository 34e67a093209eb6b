"""
contracts.py — Jedyne źródło prawdy dla typów danych w PartialEval.
Wszystkie moduły importują typy wyników i kontrakty JSON AST WYŁĄCZNIE stąd.

Dwie grupy typów:
  - typy domenowe (zamknięte sumy): Found/NotFound, Full/Partial
  - kontrakty przewodowe (pydantic): NumberNode, VariableNode, BinOpNode,
    UnaryOpNode, EvalOutcome
"""
from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ports.expression import Expression

CONTRACTS_VERSION = "1.0.0"

# Powyżej tej wartości liczby całkowite renderujemy przez repr (1e+16)
_INTEGRAL_RENDER_LIMIT = 1e16

_FLOAT_BITS = struct.Struct("<d")


# ─────────────────────────── Helpers ─────────────────────────────────────

def float_bits(value: float) -> bytes:
    """Wzorzec bitowy IEEE-754: nan == nan, 0.0 != -0.0 (jak klucz CachingOperator)."""
    return _FLOAT_BITS.pack(value)


def format_number(value: float) -> str:
    """Numeral stałej: 2.0 → '2', 2.5 → '2.5', -0.0 → '-0', inf → 'inf'."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0.0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer() and abs(value) < _INTEGRAL_RENDER_LIMIT:
        return str(int(value))
    return repr(value)


class UnreachableCombinationError(AssertionError):
    """Kombinacja wyników spoza obsługiwanych przypadków — naruszenie niezmiennika."""


# ─────────────────────────── VariableResolution ──────────────────────────

@dataclass(frozen=True)
class Found:
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class NotFound:
    pass


VariableResolution = Union[Found, NotFound]


# ─────────────────────────── EvaluationResult ────────────────────────────

@dataclass(frozen=True, eq=False)
class Full:
    """Poddrzewo obliczone w całości; wartość jest rozstrzygająca."""
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Full):
            return NotImplemented
        return float_bits(self.value) == float_bits(other.value)

    def __hash__(self) -> int:
        return hash(float_bits(self.value))

    def is_full(self) -> bool:
        return True

    def is_partial(self) -> bool:
        return False

    def as_value(self) -> float:
        return self.value

    def as_expression(self) -> Expression:
        # import lokalny: nodes importuje contracts
        from adapters.expression.nodes import Constant

        return Constant(self.value)

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Partial:
    """Poddrzewo nierozwiązane; expression jest uproszczonym drzewem."""
    expression: Expression

    def is_full(self) -> bool:
        return False

    def is_partial(self) -> bool:
        return True

    def as_value(self) -> float:
        raise ValueError(
            f"Partial result has no numeric value: {self.expression.format()}"
        )

    def as_expression(self) -> Expression:
        return self.expression

    def __str__(self) -> str:
        return self.expression.format()


EvaluationResult = Union[Full, Partial]


# ─────────────────────────── JSON AST ────────────────────────────────────

class NumberNode(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="strings")

    node_type: Literal["number"] = "number"
    value: float


class VariableNode(BaseModel):
    node_type: Literal["variable"] = "variable"
    name: str = Field(min_length=1)


class BinOpNode(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="strings")

    node_type: Literal["binop"] = "binop"
    op: Literal["+", "-", "*", "/"]
    cached: bool = False  # True = operator opakowany w CachingOperator
    left: "ExprAST"
    right: "ExprAST"


class UnaryOpNode(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="strings")

    node_type: Literal["unary"] = "unary"
    op: Literal["-"] = "-"
    operand: "ExprAST"


ExprAST = Union[NumberNode, VariableNode, BinOpNode, UnaryOpNode]
BinOpNode.model_rebuild()
UnaryOpNode.model_rebuild()


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalOutcome(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="strings")

    kind: Literal["full", "partial"]
    value: Union[float, str, None] = None   # str dla inf/-inf/nan, None dla partial
    formatted: str
    expression: Optional[ExprAST] = None    # uproszczone drzewo (tylko partial)
    unbound: list[str] = Field(default_factory=list)
