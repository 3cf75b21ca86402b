"""
DisplaySnapshot: снапшот состояния для UI

Immutable Pydantic модель с результатами трёх запросов UI:
- value: текущее значение дисплея (строка Decimal, без потери точности)
- active_operator: подсвеченный оператор или None
- input_active: True → показывать "C", False → "AC"

Совместим с JSON Schema (contracts/schema/display_snapshot.json).
"""

from typing import Optional

from pydantic import BaseModel, Field

from .engine_state import Phase
from .operators import BinaryOp


class DisplaySnapshot(BaseModel):
    """Снапшот дисплея калькулятора."""

    value: str = Field(..., description="Текущее значение (строка Decimal)")
    active_operator: Optional[BinaryOp] = Field(
        None, description="Подсвеченный оператор (None если нет)"
    )
    input_active: bool = Field(..., description="True → метка C, False → метка AC")
    phase: Phase = Field(..., description="Фаза калькулятора")

    model_config = {"frozen": True}
