"""
Тесты для SignedNumber и apply

Проверяет:
1. Упаковку Decimal в знак/модуль
2. Накопление цифр (целая и дробная часть)
3. Смену знака и процент
4. Арифметику и деление на ноль
"""

from decimal import Decimal

import pytest

from calcengine.core.domain.operators import BinaryOp
from calcengine.core.domain.signed_number import (
    NEGATIVE_ZERO,
    ZERO,
    SignedNumber,
    apply,
)
from calcengine.core.math.decimal_context import make_context


def n(text: str) -> SignedNumber:
    return SignedNumber.from_decimal(Decimal(text))


class TestSignedNumber:
    """Тесты представления знак/модуль"""

    def test_from_negative_decimal(self) -> None:
        number = n("-2.5")
        assert number.sign is True
        assert number.magnitude == Decimal("2.5")
        assert number.value == Decimal("-2.5")

    def test_negative_zero_result_is_positive(self) -> None:
        """-0 как результат арифметики хранится без знака"""
        number = SignedNumber.from_decimal(Decimal("-0"))
        assert number.sign is False

    def test_explicit_negative_zero(self) -> None:
        assert NEGATIVE_ZERO.value == 0
        assert NEGATIVE_ZERO.value.is_signed()

    def test_toggled_is_new_instance(self) -> None:
        number = n("5")
        toggled = number.toggled()

        assert toggled.value == Decimal(-5)
        assert number.value == Decimal(5)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ZERO.sign = True  # type: ignore[misc]


class TestDigitAccumulation:
    """Тесты дописывания цифр"""

    def test_integer_digits(self) -> None:
        number = SignedNumber.of_digit(1).with_digit(2).with_digit(3)
        assert number.value == 123

    def test_fraction_digits(self) -> None:
        number = SignedNumber.of_digit(2).with_digit(3, decimal_cursor=1).with_digit(
            4, decimal_cursor=2
        )
        assert number.value == Decimal("2.34")

    def test_sign_preserved(self) -> None:
        number = NEGATIVE_ZERO.with_digit(5).with_digit(7)
        assert number.value == Decimal(-57)

    def test_exact_fraction(self) -> None:
        """Никаких артефактов двоичной плавающей точки"""
        number = ZERO
        for cursor in range(1, 10):
            number = number.with_digit(1, decimal_cursor=cursor)
        assert number.value == Decimal("0.111111111")


class TestPercent:
    def test_percent_keeps_sign(self) -> None:
        assert n("-3").percent().value == Decimal("-0.03")

    def test_percent(self) -> None:
        assert n("250").percent().value == Decimal("2.5")


class TestApply:
    """Тесты бинарных операций"""

    @pytest.mark.parametrize(
        "op, left, right, expected",
        [
            (BinaryOp.ADD, "1", "2", "3"),
            (BinaryOp.SUBTRACT, "1", "2", "-1"),
            (BinaryOp.MULTIPLY, "-2", "3", "-6"),
            (BinaryOp.MULTIPLY, "-2", "-3", "6"),
            (BinaryOp.DIVIDE, "2", "4", "0.5"),
            (BinaryOp.DIVIDE, "-1", "4", "-0.25"),
        ],
    )
    def test_arithmetic(self, op, left, right, expected) -> None:
        assert apply(op, n(left), n(right)).value == Decimal(expected)

    def test_division_by_zero_is_infinity(self) -> None:
        result = apply(BinaryOp.DIVIDE, n("1"), ZERO)
        assert result.value.is_infinite()
        assert not result.sign

    def test_zero_by_zero_is_nan(self) -> None:
        assert apply(BinaryOp.DIVIDE, ZERO, ZERO).value.is_nan()

    def test_context_precision(self) -> None:
        result = apply(BinaryOp.DIVIDE, n("1"), n("3"), make_context(4))
        assert result.value == Decimal("0.3333")

    def test_term_flags(self) -> None:
        assert BinaryOp.MULTIPLY.is_term
        assert BinaryOp.DIVIDE.is_term
        assert not BinaryOp.ADD.is_term
        assert not BinaryOp.SUBTRACT.is_term
