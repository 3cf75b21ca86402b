"""Тесты для запросов UI: значение, активный оператор, метка C/AC."""

from decimal import Decimal
from functools import reduce

import pytest

from calcengine.core.domain.actions import parse_keys
from calcengine.core.domain.engine_state import INITIAL_STATE, Phase
from calcengine.core.domain.operators import BinaryOp
from calcengine.engine.queries import (
    active_operator,
    current_value,
    is_input_active,
    snapshot,
)
from calcengine.engine.state_machine import CalculatorStateMachine

MACHINE = CalculatorStateMachine()


def run(keys):
    return reduce(MACHINE.transition, parse_keys(keys), INITIAL_STATE)


class TestActiveOperator:
    """Подсветка оператора."""

    def test_initial(self):
        assert active_operator(INITIAL_STATE) is None

    @pytest.mark.parametrize("op", ["+", "-", "*", "/"])
    def test_after_operator(self, op):
        assert active_operator(run(op)) is BinaryOp(op)

    def test_after_digit(self):
        assert active_operator(run("1")) is None

    def test_hidden_while_typing_right_operand(self):
        assert active_operator(run("1 + 2")) is None

    def test_visible_after_clear(self):
        assert active_operator(run("1 + 2 C")) is BinaryOp.ADD

    def test_replaced_operator(self):
        assert active_operator(run("1 + *")) is BinaryOp.MULTIPLY

    def test_hidden_after_equals(self):
        assert active_operator(run("1 + 2 =")) is None


class TestInputActive:
    """Метка C (True) / AC (False)."""

    @pytest.mark.parametrize(
        "keys, expected",
        [
            ("", False),
            ("1", True),
            ("+", True),
            ("1 + 2 =", True),
            ("1 C", False),
            ("1 + C", False),
            ("1 C 2", True),
            ("1 AC", False),
        ],
    )
    def test_label(self, keys, expected):
        assert is_input_active(run(keys)) is expected


class TestSnapshot:
    def test_snapshot_fields(self):
        snap = snapshot(run("2 + 3 %"))

        assert snap.value == "0.06"
        assert snap.active_operator is None
        assert snap.input_active is True
        assert snap.phase is Phase.NUMBER_ENTERED

    def test_snapshot_plain_notation(self):
        """Значение без экспоненциальной записи"""
        assert snapshot(run("4 / 5 % =")).value == "80"

    def test_snapshot_infinity(self):
        assert snapshot(run("1 / 0 =")).value == "Infinity"

    def test_current_value_is_decimal(self):
        assert isinstance(current_value(run("7")), Decimal)
