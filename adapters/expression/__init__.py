"""
Expression adapter package.

Public import:
    from adapters.expression import Constant, Variable, BinaryOp, Negate
"""

from adapters.expression.nodes import BinaryOp, Constant, Expression, Negate, Variable

__all__ = ["BinaryOp", "Constant", "Expression", "Negate", "Variable"]
