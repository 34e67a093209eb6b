"""
Port: BinaryOperator
Odpowiedzialność: jedna binarna operacja arytmetyczna na liczbach float + jej symbol.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class BinaryOperator(Protocol):
    def apply(self, left: float, right: float) -> float:
        """
        Applies the operation to two IEEE-754 doubles.
        Never raises for special values: division by zero yields inf or nan,
        detectable with math.isinf / math.isnan.
        """
        ...

    def symbol(self) -> str:
        """
        Returns the display symbol used by Expression.format(), e.g. "+".
        """
        ...
