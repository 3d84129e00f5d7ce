"""
utils/naming.py

Производные имена объектов БД для одной сущности.
Нужны для:
- построения DDL таблиц,
- построения фрагментов upsert-функции,
- построения представления текущего состояния.

Принцип:
- все имена выводятся из имени сущности и имён свойств детерминированно;
- идентификатор, совпадающий с зарезервированным словом PostgreSQL
  ("user", "order"), заключается в двойные кавычки.
"""

from __future__ import annotations

from typing import Optional

from schemagen.core.constants import (
    ARRAY_HASH_SUFFIX,
    CURRENT_VIEW_PREFIX,
    CURRENT_VIEW_SUFFIX,
    INPUT_PREFIX,
    MAPPING_TABLE_INFIX,
    POINTER_TABLE_SUFFIX,
    POSTGRES_RESERVED_KEYWORDS,
    REFERENCE_ARRAY_SUFFIX,
    UPSERT_FUNCTION_PREFIX,
    VARIABLE_PREFIX,
    VERSION_TABLE_SUFFIX,
)


def quote_identifier(identifier: str) -> str:
    """Кавычит идентификатор, только если это зарезервированное слово."""
    if identifier.upper() in POSTGRES_RESERVED_KEYWORDS:
        return f'"{identifier}"'
    return identifier


def static_table_name(entity_name: str) -> str:
    return entity_name


def version_table_name(entity_name: str) -> str:
    return f"{entity_name}{VERSION_TABLE_SUFFIX}"


def pointer_table_name(entity_name: str) -> str:
    return f"{entity_name}{POINTER_TABLE_SUFFIX}"


def mapping_table_name(owner_table: str, property_name: str) -> str:
    """
    Таблица связей для свойства-массива.
    Примеры:
      ("user", "tag_ids") -> "user_to_tag_ids"
      ("user_version", "role_ids") -> "user_version_to_role_ids"
    """
    return f"{owner_table}{MAPPING_TABLE_INFIX}{property_name}"


def hash_column_name(property_name: str) -> str:
    return f"{property_name}{ARRAY_HASH_SUFFIX}"


def element_column_name(property_name: str, owner_column: Optional[str] = None) -> str:
    """
    Колонка элемента в таблице связей:
      "tag_ids" -> "tag_id"
      "addresses" -> "addresses_element"
      ("static_ids", "static_id") -> "static_ids_element"

    Единственное число выводится только из суффикса _ids и не может
    совпадать с колонкой владельца в той же таблице связей.
    """
    if property_name.endswith(REFERENCE_ARRAY_SUFFIX):
        element = property_name[:-1]
        if element != owner_column:
            return element
    return f"{property_name}_element"


def input_name(property_name: str) -> str:
    return f"{INPUT_PREFIX}{property_name}"


def variable_name(name: str) -> str:
    return f"{VARIABLE_PREFIX}{name}"


def upsert_function_name(entity_name: str) -> str:
    return f"{UPSERT_FUNCTION_PREFIX}{entity_name}"


def current_view_name(entity_name: str) -> str:
    return f"{CURRENT_VIEW_PREFIX}{entity_name}{CURRENT_VIEW_SUFFIX}"


def unique_constraint_name(table_name: str) -> str:
    return f"{table_name}_ux1"


def primary_key_name(table_name: str) -> str:
    return f"{table_name}_pk"


def foreign_key_name(table_name: str, index: int) -> str:
    return f"{table_name}_fk{index}"


def check_constraint_name(table_name: str, column_name: str) -> str:
    return f"{table_name}_{column_name}_check"


__all__ = [
    "quote_identifier",
    "static_table_name",
    "version_table_name",
    "pointer_table_name",
    "mapping_table_name",
    "hash_column_name",
    "element_column_name",
    "input_name",
    "variable_name",
    "upsert_function_name",
    "current_view_name",
    "unique_constraint_name",
    "primary_key_name",
    "foreign_key_name",
    "check_constraint_name",
]
