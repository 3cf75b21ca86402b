"""
Operators: алфавит клавиш калькулятора

Два уровня:
- BinaryOp: бинарные арифметические операторы (+ - * /), попадают в стек
- Key: все не-цифровые клавиши (операторы, %, ., +/-, =, C, AC)

Term-операторы (* и /) связываются сильнее expression-операторов (+ и -).
"""

from enum import Enum


class BinaryOp(str, Enum):
    """Бинарный арифметический оператор."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def is_term(self) -> bool:
        """True для операторов уровня term (* и /)."""
        return self in (BinaryOp.MULTIPLY, BinaryOp.DIVIDE)


class Key(str, Enum):
    """Не-цифровая клавиша калькулятора."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    PERCENT = "%"
    POINT = "."
    PLUS_MINUS = "+/-"
    EQUALS = "="
    CLEAR = "C"
    ALL_CLEAR = "AC"

    @property
    def binary_op(self) -> BinaryOp | None:
        """Соответствующий BinaryOp или None для служебных клавиш."""
        try:
            return BinaryOp(self.value)
        except ValueError:
            return None
