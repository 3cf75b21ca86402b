"""Тесты для Calculator session (точка dispatch)."""

import logging
from decimal import Decimal

import jsonschema
import pytest

from calcengine import Calculator, EngineConfig
from calcengine.core.domain.actions import digit, key
from calcengine.core.domain.engine_state import Initial, Phase
from calcengine.core.domain.operators import BinaryOp


@pytest.fixture
def calc():
    return Calculator()


class TestCalculatorSession:
    def test_press(self, calc):
        calc.press("1 + 2 * 4 + 3 * 5 =")

        assert calc.current_value == Decimal(24)
        assert calc.state.phase is Phase.EVALUATED

    def test_dispatch_actions(self, calc):
        calc.dispatch(digit(2))
        calc.dispatch(key("*"))

        assert calc.active_operator is BinaryOp.MULTIPLY
        assert calc.is_input_active

    def test_dispatch_payload(self, calc):
        calc.dispatch_all(
            [
                {"type": "digit", "digit": 3},
                {"type": "key", "key": "+"},
                {"type": "key", "key": "="},
            ]
        )

        assert calc.current_value == Decimal(6)

    def test_invalid_payload_rejected(self, calc):
        with pytest.raises(jsonschema.ValidationError):
            calc.dispatch({"type": "digit", "digit": 12})

        assert isinstance(calc.state, Initial)

    def test_input_guard_enabled_by_default(self, calc):
        calc.press("1234567890")

        assert calc.current_value == Decimal(123456789)
        assert calc.digit_count == 9

    def test_input_guard_disabled(self):
        calc = Calculator(EngineConfig(input_guard=False))
        calc.press("1234567890")

        assert calc.current_value == Decimal(1234567890)

    def test_reset(self, calc):
        calc.press("5 + 5")
        calc.reset()

        assert isinstance(calc.state, Initial)
        assert calc.digit_count == 0
        assert not calc.is_input_active

    def test_snapshot(self, calc):
        calc.press("3 +")
        snap = calc.snapshot()

        assert snap.value == "3"
        assert snap.active_operator is BinaryOp.ADD
        assert snap.phase is Phase.OPERATOR_ENTERED

    def test_no_exception_on_any_sequence(self, calc):
        calc.press("/ 0 = = % +/- . = C AC AC = * = %")

        assert calc.state.phase in Phase

    def test_debug_logging(self, calc, caplog):
        with caplog.at_level(logging.DEBUG, logger="calcengine"):
            calc.press("1 AC")

        assert any("All clear" in r.getMessage() for r in caplog.records)

    def test_rejected_digit_logged(self, caplog):
        calc = Calculator(EngineConfig(max_digits=1))
        with caplog.at_level(logging.DEBUG, logger="calcengine"):
            calc.press("12")

        assert any("rejected" in r.getMessage() for r in caplog.records)


class TestEngineConfig:
    @pytest.mark.parametrize("kwargs", [{"max_digits": 0}, {"precision": 0}])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            EngineConfig(**kwargs)

    def test_defaults(self):
        config = EngineConfig()

        assert config.max_digits == 9
        assert config.precision == 20
        assert config.input_guard is True
