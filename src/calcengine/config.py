"""Конфигурация движка калькулятора."""

from dataclasses import dataclass
from decimal import Context

from calcengine.core.math.decimal_context import DEFAULT_PRECISION, make_context


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация движка.

    - max_digits: максимум цифр в одном операнде (input guard)
    - precision: точность Decimal (значащих цифр)
    - input_guard: включить ограничение длины ввода
    """
    max_digits: int = 9
    precision: int = DEFAULT_PRECISION
    input_guard: bool = True

    def __post_init__(self):
        if self.max_digits < 1:
            raise ValueError(f"max_digits must be >= 1, got {self.max_digits}")
        if self.precision < 1:
            raise ValueError(f"precision must be >= 1, got {self.precision}")

    @property
    def context(self) -> Context:
        """Decimal контекст для заданной точности."""
        return make_context(self.precision)
