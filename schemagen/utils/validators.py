"""
utils/validators.py

Структурные проверки деклараций.
Нужны для:
- нормализатора: принять любой объект со структурой Entity,
  независимо от того, каким конструктором он создан,
- построителя раскладки хранения: читать флаги свойства единообразно.

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


_PROPERTY_FLAG_DEFAULTS = {
    "updatable": False,
    "nullable": False,
    "default": None,
    "references": None,
    "check": None,
    "array": False,
}


def _is_string_sequence(obj: Any) -> bool:
    """list/tuple строк (сама строка последовательностью не считается)."""
    if not isinstance(obj, (list, tuple)):
        return False
    return all(isinstance(x, str) for x in obj)


def conforms_to_property_shape(obj: Any) -> bool:
    """Определение свойства обязано иметь строковый атрибут type."""
    return isinstance(getattr(obj, "type", None), str)


def conforms_to_entity_shape(obj: Any) -> bool:
    """
    True, если объект обладает набором возможностей Entity:
      name: str
      properties: Mapping[str, <свойство>]
      unique: list/tuple строк

    dict с такими ключами НЕ подходит: доступ идёт через атрибуты.
    """
    name = getattr(obj, "name", None)
    properties = getattr(obj, "properties", None)
    unique = getattr(obj, "unique", None)

    if not isinstance(name, str) or not name:
        return False
    if not isinstance(properties, Mapping):
        return False
    for key, definition in properties.items():
        if not isinstance(key, str) or not conforms_to_property_shape(definition):
            return False
    return _is_string_sequence(unique)


def property_flag(definition: Any, flag: str) -> Any:
    """
    Безопасно достаёт необязательный флаг свойства.
    Пример: property_flag(p, "array") -> False, если атрибута нет.
    """
    return getattr(definition, flag, _PROPERTY_FLAG_DEFAULTS.get(flag))


__all__ = [
    "conforms_to_property_shape",
    "conforms_to_entity_shape",
    "property_flag",
]
