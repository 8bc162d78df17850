"""
Key casing helpers for translating between storage and wire field names.

Rows and records use snake_case attribute names. Some API payloads are
camelCase (e.g. enhance-stay options expose ``imageUrl``).
"""

import re
from enum import StrEnum
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


class KeyCase(StrEnum):
    SNAKE = "snake"
    CAMEL = "camel"


def snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def camel_to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


def convert_keys(data: Any, case: KeyCase | str) -> Any:
    """Recursively rename dict keys to the requested case.

    Lists are walked element by element; any other value is returned as is.
    """
    case = KeyCase(case)
    convert = snake_to_camel if case == KeyCase.CAMEL else camel_to_snake
    if isinstance(data, dict):
        return {convert(key): convert_keys(value, case) for key, value in data.items()}
    if isinstance(data, list):
        return [convert_keys(item, case) for item in data]
    return data
