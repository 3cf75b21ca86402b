"""Engine: state machine калькулятора, input guard и точка dispatch.

- Чистый редьюсер (EngineState, Action) → EngineState
- Ограничение длины ввода операнда
- Запросы UI: значение, активный оператор, метка C/AC
"""

from .input_guard import GuardedState, InputGuard
from .queries import active_operator, current_value, is_input_active, snapshot
from .session import Calculator
from .state_machine import CalculatorStateMachine

__all__ = [
    "CalculatorStateMachine",
    "InputGuard",
    "GuardedState",
    "Calculator",
    "current_value",
    "active_operator",
    "is_input_active",
    "snapshot",
]
