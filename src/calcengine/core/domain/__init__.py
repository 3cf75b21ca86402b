"""
Domain models and value objects.

Числа знак/модуль, стек выражения, фазы состояния, входные действия,
снапшот дисплея.
"""

from calcengine.core.domain.actions import (
    Action,
    DigitAction,
    KeyAction,
    digit,
    key,
    parse_action,
    parse_keys,
    parse_token,
)
from calcengine.core.domain.engine_state import (
    INITIAL_STATE,
    EngineState,
    Evaluated,
    Initial,
    NumberEntered,
    OperatorEntered,
    PendingRepeat,
    Phase,
)
from calcengine.core.domain.operators import BinaryOp, Key
from calcengine.core.domain.signed_number import (
    NEGATIVE_ZERO,
    ZERO,
    SignedNumber,
    apply,
)
from calcengine.core.domain.snapshot import DisplaySnapshot
from calcengine.core.domain.stack import (
    EMPTY_STACK,
    Operand,
    Operator,
    Stack,
    StackEntry,
    push,
    second_operand,
    stack_second,
    stack_top,
    top_operator,
)

__all__ = [
    # Operators
    "BinaryOp",
    "Key",
    # Signed number
    "SignedNumber",
    "ZERO",
    "NEGATIVE_ZERO",
    "apply",
    # Stack
    "Operand",
    "Operator",
    "Stack",
    "StackEntry",
    "EMPTY_STACK",
    "push",
    "stack_top",
    "stack_second",
    "top_operator",
    "second_operand",
    # Engine state
    "Phase",
    "PendingRepeat",
    "Initial",
    "NumberEntered",
    "OperatorEntered",
    "Evaluated",
    "EngineState",
    "INITIAL_STATE",
    # Actions
    "Action",
    "DigitAction",
    "KeyAction",
    "digit",
    "key",
    "parse_action",
    "parse_token",
    "parse_keys",
    # Snapshot
    "DisplaySnapshot",
]
