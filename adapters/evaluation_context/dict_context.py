"""
Adapter: DictEvaluationContext
Implementuje port EvaluationContext na zwykłym dict[str, float].

bind() mutuje kontekst i zwraca self (fluent chaining):
    ctx = DictEvaluationContext.empty().bind("x", 2).bind("y", 3)
Późniejsze bind() dla tej samej nazwy nadpisuje wcześniejsze.
Brak operacji usuwania zmiennej.
"""
from __future__ import annotations

from typing import Iterator, Mapping

from contracts import Found, NotFound, VariableResolution


class DictEvaluationContext:
    def __init__(self, bindings: Mapping[str, float] | None = None) -> None:
        self._values: dict[str, float] = {}
        for name, value in (bindings or {}).items():
            self.bind(name, value)

    @classmethod
    def empty(cls) -> DictEvaluationContext:
        return cls()

    @classmethod
    def from_mapping(cls, bindings: Mapping[str, float]) -> DictEvaluationContext:
        return cls(bindings)

    # -- EvaluationContext protocol -----------------------------------------

    def resolve(self, name: str) -> VariableResolution:
        if name in self._values:
            return Found(self._values[name])
        return NotFound()

    # -- Budowanie ----------------------------------------------------------

    def bind(self, name: str, value: float) -> DictEvaluationContext:
        if not name:
            raise ValueError("Variable name must not be empty")
        self._values[name] = float(value)
        return self

    def extended(self, **bindings: float) -> DictEvaluationContext:
        """Niezależna kopia z dodatkowymi zmiennymi; self pozostaje bez zmian."""
        copy = DictEvaluationContext(self._values)
        for name, value in bindings.items():
            copy.bind(name, value)
        return copy

    def names(self) -> list[str]:
        return sorted(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"DictEvaluationContext({self._values!r})"
