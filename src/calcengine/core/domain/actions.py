"""
Input Actions: входные действия калькулятора

Immutable Pydantic модели дискретных действий UI:
- DigitAction: цифра 0-9
- KeyAction: не-цифровая клавиша (операторы, %, ., +/-, =, C, AC)

JSON форма (contracts/schema/input_action.json):
    {"type": "digit", "digit": 7}
    {"type": "key", "key": "+/-"}
"""

from typing import Annotated, Any, List, Literal, Mapping, Union

from pydantic import BaseModel, Field, TypeAdapter

from .operators import Key


class DigitAction(BaseModel):
    """Нажатие цифровой клавиши."""

    type: Literal["digit"] = "digit"
    digit: int = Field(..., ge=0, le=9, description="Цифра 0-9")

    model_config = {"frozen": True}


class KeyAction(BaseModel):
    """Нажатие не-цифровой клавиши."""

    type: Literal["key"] = "key"
    key: Key = Field(..., description="Клавиша")

    model_config = {"frozen": True}


Action = Annotated[Union[DigitAction, KeyAction], Field(discriminator="type")]

_ACTION_ADAPTER: TypeAdapter = TypeAdapter(Action)


def digit(n: int) -> DigitAction:
    """Сокращение для DigitAction."""
    return DigitAction(digit=n)


def key(k: Union[Key, str]) -> KeyAction:
    """Сокращение для KeyAction."""
    return KeyAction(key=Key(k))


def parse_action(payload: Mapping[str, Any]) -> Union[DigitAction, KeyAction]:
    """
    Разбор JSON-совместимого payload в действие.

    Args:
        payload: dict вида {"type": "digit", "digit": 1} или {"type": "key", "key": "="}

    Returns:
        DigitAction или KeyAction

    Raises:
        pydantic.ValidationError: Если payload не соответствует ни одной модели
    """
    return _ACTION_ADAPTER.validate_python(payload)


def parse_token(token: str) -> Union[DigitAction, KeyAction]:
    """
    Разбор одного токена клавиатуры ("7", "+", "+/-", "AC").

    Raises:
        ValueError: Если токен не является клавишей калькулятора
    """
    if len(token) == 1 and token.isascii() and token.isdigit():
        return DigitAction(digit=int(token))
    try:
        return KeyAction(key=Key(token))
    except ValueError:
        raise ValueError(f"Unknown calculator key: {token!r}")


def parse_keys(text: str) -> List[Union[DigitAction, KeyAction]]:
    """
    Разбор последовательности клавиш, разделённых пробелами.

    Многозначные числа разбиваются на отдельные цифры: "12 + 3 =" →
    [1, 2, +, 3, =].

    Raises:
        ValueError: Если встречен неизвестный токен
    """
    actions: List[Union[DigitAction, KeyAction]] = []
    for token in text.split():
        if token.isascii() and token.isdigit():
            actions.extend(DigitAction(digit=int(ch)) for ch in token)
        else:
            actions.append(parse_token(token))
    return actions
