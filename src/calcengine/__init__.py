"""
calcengine: движок четырёхфункционального калькулятора.

Детерминированная state machine с двухуровневым вычислителем стека:
приоритет операторов, повторное =, %, +/- и ввод десятичной точки.
"""

from calcengine.config import EngineConfig
from calcengine.engine import (
    Calculator,
    CalculatorStateMachine,
    GuardedState,
    InputGuard,
    active_operator,
    current_value,
    is_input_active,
    snapshot,
)

__version__ = "0.1.0"

__all__ = [
    "EngineConfig",
    "Calculator",
    "CalculatorStateMachine",
    "InputGuard",
    "GuardedState",
    "current_value",
    "active_operator",
    "is_input_active",
    "snapshot",
]
