"""
Adapter: operatory arytmetyczne (Add, Subtract, Multiply, Divide)
Implementuje port BinaryOperator — bezstanowe strategie na float (IEEE-754).

Dzielenie przez zero NIE rzuca wyjątku: natywne `/` w Pythonie rzuca
ZeroDivisionError, więc ten przypadek mapujemy jawnie na inf / nan.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from ports.binary_operator import BinaryOperator


def _ieee_div(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        # 0/0 i nan/0 → nan; x/±0 → ±inf zgodnie ze znakami argumentów
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


@dataclass(frozen=True)
class AddOperator:
    def apply(self, left: float, right: float) -> float:
        return left + right

    def symbol(self) -> str:
        return "+"


@dataclass(frozen=True)
class SubtractOperator:
    def apply(self, left: float, right: float) -> float:
        return left - right

    def symbol(self) -> str:
        return "-"


@dataclass(frozen=True)
class MultiplyOperator:
    def apply(self, left: float, right: float) -> float:
        return left * right

    def symbol(self) -> str:
        return "*"


@dataclass(frozen=True)
class DivideOperator:
    def apply(self, left: float, right: float) -> float:
        return _ieee_div(left, right)

    def symbol(self) -> str:
        return "/"


# Mapowanie symboli na klasy strategii
_OPERATORS: dict[str, type] = {
    "+": AddOperator,
    "-": SubtractOperator,
    "*": MultiplyOperator,
    "/": DivideOperator,
}


def operator_for_symbol(symbol: str, cached: bool = False) -> BinaryOperator:
    """
    Zwraca NOWĄ instancję strategii dla symbolu.
    cached=True opakowuje ją w CachingOperator (osobny cache per wywołanie).
    """
    cls = _OPERATORS.get(symbol)
    if cls is None:
        raise ValueError(f"Unknown operator: {symbol!r}")
    operator: BinaryOperator = cls()
    if cached:
        from adapters.binary_operator.caching_proxy import CachingOperator

        operator = CachingOperator(operator)
    return operator
