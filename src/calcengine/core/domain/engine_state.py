"""
EngineState: неизменяемое состояние калькулятора

Tagged union по фазам; каждая фаза содержит только допустимые для неё поля:

- Initial: чистое состояние (ноль на дисплее, пустой стек)
- NumberEntered: набирается операнд (decimal_cursor, typing, stack)
- OperatorEntered: оператор ожидает правый операнд (stack с оператором на вершине)
- Evaluated: результат вычисления (стек пуст, pending для повторного =)

Поле cleared: клавиша C сбросила текущий операнд (C вместо AC не показывается).
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from calcengine.core.domain.operators import BinaryOp
from calcengine.core.domain.signed_number import ZERO, SignedNumber
from calcengine.core.domain.stack import EMPTY_STACK, Stack


class Phase(str, Enum):
    """Фаза калькулятора."""

    INITIAL = "INITIAL"
    NUMBER_ENTERED = "NUMBER_ENTERED"
    OPERATOR_ENTERED = "OPERATOR_ENTERED"
    EVALUATED = "EVALUATED"


@dataclass(frozen=True)
class PendingRepeat:
    """Операция для повторного = (1 + 3 = = → 7)."""

    op: BinaryOp
    operand: SignedNumber


@dataclass(frozen=True)
class Initial:
    """Начальное состояние (после запуска или AC)."""

    phase: ClassVar[Phase] = Phase.INITIAL

    @property
    def current(self) -> SignedNumber:
        return ZERO

    @property
    def stack(self) -> Stack:
        return EMPTY_STACK

    @property
    def cleared(self) -> bool:
        return False


@dataclass(frozen=True)
class NumberEntered:
    """Набирается операнд."""

    phase: ClassVar[Phase] = Phase.NUMBER_ENTERED

    current: SignedNumber
    stack: Stack = EMPTY_STACK
    decimal_cursor: int = 0
    typing: bool = True
    cleared: bool = False


@dataclass(frozen=True)
class OperatorEntered:
    """Оператор на вершине стека ожидает правый операнд."""

    phase: ClassVar[Phase] = Phase.OPERATOR_ENTERED

    current: SignedNumber
    stack: Stack
    cleared: bool = False


@dataclass(frozen=True)
class Evaluated:
    """Результат вычисления по =."""

    phase: ClassVar[Phase] = Phase.EVALUATED

    current: SignedNumber
    pending: Optional[PendingRepeat] = None
    decimal_cursor: int = 0
    typing: bool = False
    cleared: bool = False

    @property
    def stack(self) -> Stack:
        return EMPTY_STACK


EngineState = Union[Initial, NumberEntered, OperatorEntered, Evaluated]

INITIAL_STATE: EngineState = Initial()
