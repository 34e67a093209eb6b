"""
Adapter: CachingOperator
Proxy/dekorator portu BinaryOperator — memoizuje apply() po parze argumentów.

Klucz cache to wzorzec bitowy IEEE-754 obu argumentów (struct "<dd"):
  - nan trafia w cache (ten sam wzorzec bitowy), mimo że nan != nan
  - 0.0 i -0.0 są różnymi kluczami (1/0.0 != 1/-0.0)
  - brak normalizacji przemienności: (2, 3) i (3, 2) to osobne wpisy

Nie jest bezpieczny wątkowo — cache to prywatny, niesynchronizowany dict.
"""
from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field

from ports.binary_operator import BinaryOperator

logger = logging.getLogger("partial_eval.caching_operator")

_KEY = struct.Struct("<dd")


@dataclass(frozen=True)
class CachingOperator:
    inner: BinaryOperator
    _cache: dict[bytes, float] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def apply(self, left: float, right: float) -> float:
        key = _KEY.pack(left, right)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit: %r %s %r", left, self.symbol(), right)
            return cached
        value = self.inner.apply(left, right)
        self._cache[key] = value
        logger.debug("Cache miss: %r %s %r = %r", left, self.symbol(), right, value)
        return value

    def symbol(self) -> str:
        return self.inner.symbol()

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()
