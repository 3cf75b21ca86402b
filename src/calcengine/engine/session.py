"""Calculator Session: точка dispatch для UI.

Единственный писатель текущего состояния: принимает действия, заменяет
состояние целиком и отвечает на запросы UI. Действия принимаются в трёх
формах:
- DigitAction / KeyAction
- JSON-совместимый dict (валидируется контрактом input_action)
- строка клавиш ("1 + 2 =")
"""

import logging
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Union

from calcengine.config import EngineConfig
from calcengine.core.contracts import validate_input_action
from calcengine.core.domain.actions import (
    DigitAction,
    KeyAction,
    parse_action,
    parse_keys,
)
from calcengine.core.domain.engine_state import EngineState
from calcengine.core.domain.operators import BinaryOp, Key
from calcengine.core.domain.snapshot import DisplaySnapshot
from calcengine.engine import queries
from calcengine.engine.input_guard import GuardedState, InputGuard
from calcengine.engine.state_machine import CalculatorStateMachine

logger = logging.getLogger(__name__)

ActionLike = Union[DigitAction, KeyAction, Mapping[str, Any]]


class Calculator:
    """Калькулятор: текущее состояние + dispatch + запросы UI."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self._machine = CalculatorStateMachine(self.config)
        self._guard = InputGuard(self._machine, self.config)
        self._state = GuardedState()

    @property
    def state(self) -> EngineState:
        """Текущее состояние движка."""
        return self._state.engine

    @property
    def digit_count(self) -> int:
        """Количество цифр, набранных в текущем операнде."""
        return self._state.digit_count

    def dispatch(self, action: ActionLike) -> EngineState:
        """
        Применение одного действия.

        Args:
            action: DigitAction, KeyAction или dict по контракту input_action

        Returns:
            Новое состояние движка

        Raises:
            jsonschema.ValidationError: Если dict не соответствует контракту
        """
        if not isinstance(action, (DigitAction, KeyAction)):
            validate_input_action(dict(action))
            action = parse_action(action)

        if self.config.input_guard:
            self._state = self._guard.transition(self._state, action)
        else:
            engine = self._machine.transition(self._state.engine, action)
            self._state = GuardedState(engine=engine)

        if isinstance(action, KeyAction) and action.key is Key.ALL_CLEAR:
            logger.debug("All clear: state reset")
        logger.debug("Dispatched %s → %s", action, self._state.engine.phase.value)
        return self._state.engine

    def dispatch_all(self, actions: Iterable[ActionLike]) -> EngineState:
        """Последовательное применение действий."""
        for action in actions:
            self.dispatch(action)
        return self._state.engine

    def press(self, keys: str) -> EngineState:
        """Применение строки клавиш, разделённых пробелами ("1 + 2 =")."""
        return self.dispatch_all(parse_keys(keys))

    def reset(self) -> None:
        """Полный сброс (эквивалент AC)."""
        self.dispatch(KeyAction(key=Key.ALL_CLEAR))

    # -------------------------------------------------------------------------
    # Запросы UI
    # -------------------------------------------------------------------------

    @property
    def current_value(self) -> Decimal:
        return queries.current_value(self._state.engine)

    @property
    def active_operator(self) -> Optional[BinaryOp]:
        return queries.active_operator(self._state.engine)

    @property
    def is_input_active(self) -> bool:
        return queries.is_input_active(self._state.engine)

    def snapshot(self) -> DisplaySnapshot:
        return queries.snapshot(self._state.engine)
