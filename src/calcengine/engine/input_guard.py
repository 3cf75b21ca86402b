"""Input Guard: ограничение длины вводимого операнда.

Декоратор над CalculatorStateMachine:
- Цифра: +1 к счётчику, отклоняется при достижении max_digits
- Точка: +1 только если начинает новый операнд (не в NUMBER_ENTERED)
- +/-: счётчик не меняется
- Любая другая клавиша: счётчик сбрасывается в 0
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from calcengine.config import EngineConfig
from calcengine.core.domain.actions import DigitAction, KeyAction
from calcengine.core.domain.engine_state import INITIAL_STATE, EngineState, Phase
from calcengine.core.domain.operators import Key
from calcengine.engine.state_machine import CalculatorStateMachine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuardedState:
    """Состояние движка вместе со счётчиком набранных цифр."""

    engine: EngineState = INITIAL_STATE
    digit_count: int = 0


class InputGuard:
    """Ограничение количества цифр в операнде."""

    def __init__(
        self,
        machine: Optional[CalculatorStateMachine] = None,
        config: Optional[EngineConfig] = None,
    ):
        """
        Args:
            machine: оборачиваемая state machine (по умолчанию из config)
            config: конфигурация (max_digits)
        """
        self.config = config or (machine.config if machine else EngineConfig())
        self.machine = machine or CalculatorStateMachine(self.config)
        self.max_digits = self.config.max_digits

    def transition(
        self, state: GuardedState, action: Union[DigitAction, KeyAction]
    ) -> GuardedState:
        """Применение действия с учётом лимита цифр."""
        if isinstance(action, DigitAction):
            if state.digit_count >= self.max_digits:
                logger.debug(
                    "Digit %d rejected: limit %d reached", action.digit, self.max_digits
                )
                return state
            return GuardedState(
                engine=self.machine.transition(state.engine, action),
                digit_count=state.digit_count + 1,
            )

        if action.key is Key.POINT:
            if state.digit_count >= self.max_digits:
                logger.debug("Point rejected: limit %d reached", self.max_digits)
                return state
            # Точка внутри набираемого операнда не занимает позицию
            in_number = state.engine.phase is Phase.NUMBER_ENTERED
            return GuardedState(
                engine=self.machine.transition(state.engine, action),
                digit_count=state.digit_count if in_number else state.digit_count + 1,
            )

        if action.key is Key.PLUS_MINUS:
            return GuardedState(
                engine=self.machine.transition(state.engine, action),
                digit_count=state.digit_count,
            )

        return GuardedState(
            engine=self.machine.transition(state.engine, action), digit_count=0
        )
