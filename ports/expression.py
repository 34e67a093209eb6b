"""
Port: Expression
Odpowiedzialność: niemutowalny węzeł drzewa wyrażenia z częściową ewaluacją.
"""
from typing import Protocol, runtime_checkable

from contracts import EvaluationResult
from ports.evaluation_context import EvaluationContext


@runtime_checkable
class Expression(Protocol):
    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        """
        Reduces the tree as far as the context allows.
        Returns Full(value) if every variable was bound, otherwise
        Partial(expression) with every resolvable sub-tree folded to a constant.
        Deterministic and side-effect free on the tree and the context.
        """
        ...

    def format(self) -> str:
        """
        Structural rendering, e.g. "(2 + y)". Does not consult any context.
        """
        ...
