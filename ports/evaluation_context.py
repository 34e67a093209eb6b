"""
Port: EvaluationContext
Odpowiedzialność: odwzorowanie nazwa zmiennej → wartość, odpytywane podczas ewaluacji.
"""
from typing import Protocol, runtime_checkable

from contracts import VariableResolution


@runtime_checkable
class EvaluationContext(Protocol):
    def resolve(self, name: str) -> VariableResolution:
        """
        Looks up a variable by name.
        Returns Found(value) if the name is bound, NotFound() otherwise.
        Pure read: never mutates the context.
        """
        ...
