"""
Binary operator adapter package.

Public import:
    from adapters.binary_operator import AddOperator, CachingOperator
"""

from adapters.binary_operator.arithmetic import (
    AddOperator,
    DivideOperator,
    MultiplyOperator,
    SubtractOperator,
    operator_for_symbol,
)
from adapters.binary_operator.caching_proxy import CachingOperator

__all__ = [
    "AddOperator",
    "CachingOperator",
    "DivideOperator",
    "MultiplyOperator",
    "SubtractOperator",
    "operator_for_symbol",
]
