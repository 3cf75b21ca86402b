"""Запросы UI к состоянию калькулятора.

- current_value: значение для дисплея
- active_operator: подсвеченная клавиша оператора
- is_input_active: метка C (True) или AC (False)
"""

from decimal import Decimal
from typing import Optional

from calcengine.core.domain.engine_state import (
    EngineState,
    Initial,
    NumberEntered,
    OperatorEntered,
)
from calcengine.core.domain.operators import BinaryOp
from calcengine.core.domain.snapshot import DisplaySnapshot
from calcengine.core.domain.stack import top_operator


def current_value(state: EngineState) -> Decimal:
    """Текущее значение дисплея."""
    return state.current.value


def active_operator(state: EngineState) -> Optional[BinaryOp]:
    """Оператор, ожидающий правый операнд.

    Виден всегда в OPERATOR_ENTERED; в NUMBER_ENTERED только после C.
    """
    if isinstance(state, OperatorEntered):
        return top_operator(state.stack)
    if isinstance(state, NumberEntered) and state.cleared:
        return top_operator(state.stack)
    return None


def is_input_active(state: EngineState) -> bool:
    """True если был ввод/вычисление и не было сброса (метка C)."""
    if isinstance(state, Initial):
        return False
    return not state.cleared


def snapshot(state: EngineState) -> DisplaySnapshot:
    """Все три запроса UI одним неизменяемым снапшотом."""
    return DisplaySnapshot(
        value=format(current_value(state), "f"),
        active_operator=active_operator(state),
        input_active=is_input_active(state),
        phase=state.phase,
    )
