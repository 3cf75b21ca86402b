"""
Stack Evaluator: вычисление стека выражения

Двухуровневая свёртка (precedence climbing для двух уровней приоритета):
1. Term: серия * и / слева направо
2. Expression: серия + и - над результатами term

Стек обрабатывается снизу вверх (в хронологическом порядке ввода).
Вычисление всегда выполняется заново по всему стеку: более поздний оператор
может завершить ранее незавершённый term.

Граничные случаи:
- Пустой стек → 0
- Оператор без правого операнда на вершине → операнд игнорируется
  (например [2, *] → 2, [1, +] → 1 + 0)
"""

from decimal import Context
from typing import List

from calcengine.core.domain.signed_number import ZERO, SignedNumber, apply
from calcengine.core.domain.stack import Operand, Operator, Stack, StackEntry
from calcengine.core.math.decimal_context import DEFAULT_CONTEXT


def evaluate_stack(stack: Stack, context: Context = DEFAULT_CONTEXT) -> SignedNumber:
    """
    Вычисление стека с учётом приоритета операторов.

    Args:
        stack: Стек выражения (не изменяется)
        context: Decimal контекст движка

    Returns:
        Результат вычисления (ZERO для пустого стека)

    Examples:
        [2, +, 4, *, 5] → 22
        [2, *, 4, +, 5] → 13
        [1, +, 3, -]    → 4
    """
    # Рабочая копия: конец списка = низ стека, pop() отдаёт следующий по времени элемент
    pending: List[StackEntry] = list(reversed(stack))
    return _reduce_expression(pending, context)


def _reduce_term(pending: List[StackEntry], context: Context) -> SignedNumber:
    """Свёртка серии * и / слева направо."""
    if not pending:
        return ZERO

    head = pending.pop()
    if isinstance(head, Operator):
        pending.append(head)
        return ZERO

    acc = head.number
    while pending:
        entry = pending.pop()
        if not (isinstance(entry, Operator) and entry.op.is_term):
            pending.append(entry)
            break

        if not pending:
            # Оператор без правого операнда
            break

        right = pending.pop()
        if isinstance(right, Operand):
            acc = apply(entry.op, acc, right.number, context)
        else:
            pending.extend((right, entry))
            break

    return acc


def _reduce_expression(pending: List[StackEntry], context: Context) -> SignedNumber:
    """Свёртка серии + и - над результатами term."""
    acc = _reduce_term(pending, context)
    while pending:
        entry = pending.pop()
        if not (isinstance(entry, Operator) and not entry.op.is_term):
            pending.append(entry)
            break

        acc = apply(entry.op, acc, _reduce_term(pending, context), context)

    return acc
