"""
Stack: стек выражения

Упорядоченная последовательность чередующихся элементов:
Operand, Operator, Operand, Operator, ...

Вершина стека: последний добавленный элемент (операнд, ожидающий оператора,
либо оператор, ожидающий правого операнда). Стек неизменяемый (tuple):
push возвращает новый стек.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from calcengine.core.domain.operators import BinaryOp
from calcengine.core.domain.signed_number import SignedNumber


@dataclass(frozen=True)
class Operand:
    """Элемент стека: число."""

    number: SignedNumber


@dataclass(frozen=True)
class Operator:
    """Элемент стека: бинарный оператор."""

    op: BinaryOp


StackEntry = Union[Operand, Operator]
Stack = Tuple[StackEntry, ...]

EMPTY_STACK: Stack = ()


def push(stack: Stack, *entries: StackEntry) -> Stack:
    """Новый стек с добавленными элементами."""
    return stack + entries


def stack_top(stack: Stack) -> Optional[StackEntry]:
    """Вершина стека или None."""
    return stack[-1] if stack else None


def stack_second(stack: Stack) -> Optional[StackEntry]:
    """Элемент под вершиной или None."""
    return stack[-2] if len(stack) >= 2 else None


def top_operator(stack: Stack) -> Optional[BinaryOp]:
    """Оператор на вершине стека (None если вершина пуста или операнд)."""
    top = stack_top(stack)
    return top.op if isinstance(top, Operator) else None


def second_operand(stack: Stack) -> Optional[SignedNumber]:
    """Операнд под вершиной стека (левый операнд незавершённого выражения)."""
    second = stack_second(stack)
    return second.number if isinstance(second, Operand) else None
