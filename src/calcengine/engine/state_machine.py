"""Calculator State Machine: чистый редьюсер состояния калькулятора.

Фазы: INITIAL / NUMBER_ENTERED / OPERATOR_ENTERED / EVALUATED.

Каждое действие превращает EngineState в новый EngineState:
- Функция чистая: одна и та же пара (state, action) всегда даёт один результат
- Таблица переходов тотальна: любая клавиша в любой фазе определена
- Исключения не бросаются (деление на ноль → Infinity/NaN, пустой стек → 0)

Ключевые правила:
- Приоритет операторов: стек перевычисляется целиком (evaluate_stack)
- Повторное =: PendingRepeat запоминает оператор и правый операнд
- %: в контексте + и - берётся процент от накопленной суммы (2 + 3 % → 0.06)
"""

from dataclasses import replace
from typing import Optional, Union

from calcengine.config import EngineConfig
from calcengine.core.domain.actions import DigitAction, KeyAction
from calcengine.core.domain.engine_state import (
    INITIAL_STATE,
    EngineState,
    Evaluated,
    Initial,
    NumberEntered,
    OperatorEntered,
    PendingRepeat,
)
from calcengine.core.domain.operators import BinaryOp, Key
from calcengine.core.domain.signed_number import NEGATIVE_ZERO, ZERO, SignedNumber, apply
from calcengine.core.domain.stack import (
    Operand,
    Operator,
    push,
    second_operand,
    top_operator,
)
from calcengine.core.math.evaluator import evaluate_stack


class CalculatorStateMachine:
    """Переходы состояния калькулятора.

    Экземпляр хранит только неизменяемую конфигурацию (Decimal контекст);
    всё состояние передаётся и возвращается явно.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Args:
            config: конфигурация движка (точность Decimal)
        """
        self.config = config or EngineConfig()
        self._context = self.config.context

    def transition(
        self, state: EngineState, action: Union[DigitAction, KeyAction]
    ) -> EngineState:
        """Применение действия к состоянию.

        Args:
            state: текущее состояние
            action: цифра или клавиша

        Returns:
            Новое состояние (или то же самое для no-op переходов)
        """
        if isinstance(action, DigitAction):
            return self._on_digit(state, action.digit)

        key = action.key
        if key is Key.ALL_CLEAR:
            return INITIAL_STATE
        if key is Key.CLEAR:
            return self._on_clear(state)
        if key is Key.PLUS_MINUS:
            return self._on_plus_minus(state)
        if key is Key.PERCENT:
            return self._on_percent(state)
        if key is Key.POINT:
            return self._on_point(state)
        if key is Key.EQUALS:
            return self._on_equals(state)
        return self._on_operator(state, BinaryOp(key.value))

    # -------------------------------------------------------------------------
    # Ввод числа
    # -------------------------------------------------------------------------

    def _on_digit(self, state: EngineState, digit: int) -> EngineState:
        if isinstance(state, (Initial, OperatorEntered)):
            return NumberEntered(current=SignedNumber.of_digit(digit), stack=state.stack)

        # NUMBER_ENTERED / EVALUATED: продолжение набора или новый операнд
        if state.typing:
            current = state.current.with_digit(digit, state.decimal_cursor, self._context)
            cursor = state.decimal_cursor + 1 if state.decimal_cursor > 0 else 0
        else:
            current = SignedNumber.of_digit(digit)
            cursor = 0

        return replace(
            state, current=current, decimal_cursor=cursor, typing=True, cleared=False
        )

    def _on_point(self, state: EngineState) -> EngineState:
        if isinstance(state, (Initial, OperatorEntered)):
            return NumberEntered(current=ZERO, stack=state.stack, decimal_cursor=1)

        if state.typing:
            # Повторная точка игнорируется: 2 . 3 . → 2.3
            current = state.current
            cursor = state.decimal_cursor or 1
        else:
            current = ZERO
            cursor = 1

        return replace(
            state, current=current, decimal_cursor=cursor, typing=True, cleared=False
        )

    def _on_plus_minus(self, state: EngineState) -> EngineState:
        if isinstance(state, (Initial, OperatorEntered)):
            # Знак до первой цифры: +/- 5 → -5
            return NumberEntered(
                current=NEGATIVE_ZERO, stack=state.stack, cleared=state.cleared
            )

        if isinstance(state, NumberEntered):
            return replace(state, current=state.current.toggled(), typing=True)

        return replace(state, current=state.current.toggled())

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def _on_operator(self, state: EngineState, op: BinaryOp) -> EngineState:
        if isinstance(state, OperatorEntered):
            # Замена оператора на вершине стека
            if op.is_term:
                left = second_operand(state.stack)
                current = left if left is not None else state.current
            else:
                current = evaluate_stack(state.stack, self._context)
            return replace(
                state, current=current, stack=push(state.stack[:-1], Operator(op))
            )

        stack = push(state.stack, Operand(state.current))
        # * и / ждут правый операнд term-а, + и - завершают выражение слева
        current = state.current if op.is_term else evaluate_stack(stack, self._context)
        return OperatorEntered(
            current=current, stack=push(stack, Operator(op)), cleared=state.cleared
        )

    def _on_equals(self, state: EngineState) -> EngineState:
        if isinstance(state, Initial):
            return state

        if isinstance(state, Evaluated):
            # Повторное =: 1 + 3 = = → 7
            current = state.current
            if state.pending is not None:
                current = apply(
                    state.pending.op, current, state.pending.operand, self._context
                )
            return replace(state, current=current, decimal_cursor=0, typing=False)

        op = top_operator(state.stack)
        if isinstance(state, NumberEntered):
            pending = PendingRepeat(op, state.current) if op is not None else None
        else:
            # Оператор без правого операнда: 3 + = → 3 + 3
            left = second_operand(state.stack)
            pending = (
                PendingRepeat(op, left) if op is not None and left is not None else None
            )

        current = evaluate_stack(push(state.stack, Operand(state.current)), self._context)
        return Evaluated(current=current, pending=pending, cleared=state.cleared)

    def _on_percent(self, state: EngineState) -> EngineState:
        if isinstance(state, Initial):
            return state

        if isinstance(state, Evaluated):
            return replace(
                state,
                current=state.current.percent(self._context),
                decimal_cursor=0,
                typing=False,
            )

        op = top_operator(state.stack)
        scaled = state.current.percent(self._context)
        if op is None or op.is_term:
            # Мультипликативный контекст: процент без базы
            current = scaled
        elif isinstance(state, OperatorEntered):
            # 3 + % → 3 * 0.03
            left = second_operand(state.stack)
            base = left if left is not None else ZERO
            current = apply(BinaryOp.MULTIPLY, base, scaled, self._context)
        else:
            # 2 + 3 % → 2 * 0.03: база = сумма стека без ожидающего оператора
            base = evaluate_stack(state.stack[:-1], self._context)
            current = apply(BinaryOp.MULTIPLY, base, scaled, self._context)

        if isinstance(state, OperatorEntered):
            return replace(state, current=current)
        return replace(state, current=current, decimal_cursor=0, typing=False)

    def _on_clear(self, state: EngineState) -> EngineState:
        if isinstance(state, Initial):
            return state
        if isinstance(state, OperatorEntered):
            return replace(state, current=ZERO, cleared=True)
        return replace(
            state, current=ZERO, decimal_cursor=0, typing=False, cleared=True
        )
