"""
Core math modules

Decimal контекст движка. Вычислитель стека: calcengine.core.math.evaluator.
"""

from calcengine.core.math.decimal_context import (
    DEFAULT_CONTEXT,
    DEFAULT_PRECISION,
    PERCENT_DIVISOR,
    make_context,
)

__all__ = [
    "DEFAULT_PRECISION",
    "DEFAULT_CONTEXT",
    "PERCENT_DIVISOR",
    "make_context",
]
