"""
SignedNumber: число в форме знак/модуль

Представление числа на дисплее калькулятора:
- sign: True для отрицательных значений
- magnitude: модуль (Decimal, >= 0, либо Infinity/NaN)

Форма знак/модуль нужна для клавиши +/-: она может сделать отрицательным
ноль до того, как набрана первая цифра (+/- 5 → -5).

Все операции возвращают новый экземпляр (frozen dataclass).
"""

from dataclasses import dataclass
from decimal import Context, Decimal

from calcengine.core.domain.operators import BinaryOp
from calcengine.core.math.decimal_context import DEFAULT_CONTEXT, PERCENT_DIVISOR


@dataclass(frozen=True)
class SignedNumber:
    """Число со знаком в форме знак/модуль."""

    sign: bool
    magnitude: Decimal

    @classmethod
    def of_digit(cls, digit: int) -> "SignedNumber":
        """Новое положительное число из одной цифры."""
        return cls(sign=False, magnitude=Decimal(digit))

    @classmethod
    def from_decimal(cls, value: Decimal) -> "SignedNumber":
        """
        Упаковка Decimal в знак/модуль.

        Отрицательный ноль результата арифметики хранится как положительный.
        """
        negative = value.is_signed() and not value.is_zero() and not value.is_nan()
        return cls(sign=negative, magnitude=value.copy_abs())

    @property
    def value(self) -> Decimal:
        """Числовое значение (-magnitude при sign=True)."""
        return self.magnitude.copy_negate() if self.sign else self.magnitude

    def toggled(self) -> "SignedNumber":
        """Смена знака (+/-)."""
        return SignedNumber(sign=not self.sign, magnitude=self.magnitude)

    def with_digit(
        self, digit: int, decimal_cursor: int = 0, context: Context = DEFAULT_CONTEXT
    ) -> "SignedNumber":
        """
        Дописывание цифры справа.

        Args:
            digit: Цифра 0-9
            decimal_cursor: 0 для целой части, n > 0 для n-й дробной цифры
            context: Decimal контекст движка

        Returns:
            Новое число с тем же знаком
        """
        if decimal_cursor > 0:
            place = Decimal(digit).scaleb(-decimal_cursor, context=context)
            magnitude = context.add(self.magnitude, place)
        else:
            magnitude = context.add(context.multiply(self.magnitude, 10), digit)
        return SignedNumber(sign=self.sign, magnitude=magnitude)

    def percent(self, context: Context = DEFAULT_CONTEXT) -> "SignedNumber":
        """Деление модуля на 100 с сохранением знака."""
        return SignedNumber(
            sign=self.sign, magnitude=context.divide(self.magnitude, PERCENT_DIVISOR)
        )


ZERO = SignedNumber(sign=False, magnitude=Decimal(0))

NEGATIVE_ZERO = SignedNumber(sign=True, magnitude=Decimal(0))


def apply(
    op: BinaryOp,
    left: SignedNumber,
    right: SignedNumber,
    context: Context = DEFAULT_CONTEXT,
) -> SignedNumber:
    """
    Применение бинарного оператора.

    Деление на ноль не перехватывается: контекст без traps возвращает
    Infinity (x/0) или NaN (0/0).

    Args:
        op: Оператор
        left: Левый операнд
        right: Правый операнд
        context: Decimal контекст движка

    Returns:
        Результат в форме знак/модуль
    """
    l, r = left.value, right.value
    if op is BinaryOp.ADD:
        result = context.add(l, r)
    elif op is BinaryOp.SUBTRACT:
        result = context.subtract(l, r)
    elif op is BinaryOp.MULTIPLY:
        result = context.multiply(l, r)
    else:
        result = context.divide(l, r)
    return SignedNumber.from_decimal(result)
