"""
Decimal Context: численное представление движка

Все вычисления выполняются в decimal.Decimal с явным контекстом:
- Точность по умолчанию 20 значащих цифр
- Округление ROUND_HALF_EVEN
- Все traps отключены: деление на ноль даёт Infinity, 0/0 даёт NaN

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакая арифметическая операция движка не бросает исключение
2. Контекст потока (decimal.getcontext()) никогда не используется
"""

from decimal import ROUND_HALF_EVEN, Context, Decimal
from functools import lru_cache
from typing import Final

# Точность по умолчанию (значащих цифр)
DEFAULT_PRECISION: Final[int] = 20

# Делитель для клавиши %
PERCENT_DIVISOR: Final[Decimal] = Decimal(100)


@lru_cache(maxsize=None)
def make_context(precision: int = DEFAULT_PRECISION) -> Context:
    """
    Контекст Decimal для движка.

    Args:
        precision: Количество значащих цифр (>= 1)

    Returns:
        Context без traps (ошибки дают Infinity/NaN вместо исключений)

    Raises:
        ValueError: Если precision < 1
    """
    if precision < 1:
        raise ValueError(f"precision must be >= 1, got {precision}")

    return Context(prec=precision, rounding=ROUND_HALF_EVEN, traps=[])


DEFAULT_CONTEXT: Final[Context] = make_context(DEFAULT_PRECISION)
