"""
JSON Schema контракты движка.

Валидаторы для данных, пересекающих границу UI ↔ движок.
"""

from .validators import (
    ContractValidator,
    DisplaySnapshotValidator,
    InputActionValidator,
    SchemaLoader,
    validate_display_snapshot,
    validate_input_action,
)

__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "InputActionValidator",
    "DisplaySnapshotValidator",
    "validate_input_action",
    "validate_display_snapshot",
]
