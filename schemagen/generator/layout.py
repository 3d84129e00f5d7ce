"""
Раскладка хранения одной сущности.

Выводит из декларации все имена таблиц, колонок и входных параметров,
которые используют построители фрагментов, DDL таблиц и представление.
Никаких SQL-фрагментов здесь нет: только имена и роли свойств.

Роли свойств:
- identity: перечислены в unique; всегда статические
- dynamic: updatable и не входят в unique; живут в строках версий
- static: все остальные; живут в статической строке
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from schemagen.core.constants import (
    ARRAY_HASH_TYPE,
    STATIC_ID_COLUMN,
    VERSION_ID_COLUMN,
)
from schemagen.utils.naming import (
    element_column_name,
    hash_column_name,
    input_name,
    mapping_table_name,
    pointer_table_name,
    quote_identifier,
    static_table_name,
    unique_constraint_name,
    variable_name,
    version_table_name,
)
from schemagen.utils.validators import property_flag


@dataclass(frozen=True)
class MappingTable:
    """Таблица связей: одна строка на элемент массива."""
    name: str
    owner_table: str
    owner_column: str
    element_column: str
    element_type: str
    references: Optional[str] = None
    check: Optional[str] = None


@dataclass(frozen=True)
class StoredProperty:
    name: str
    sql_type: str
    column: str
    column_type: str
    input_name: str
    value_expression: str
    nullable: bool = False
    default: Optional[str] = None
    references: Optional[str] = None
    check: Optional[str] = None
    is_identity: bool = False
    is_dynamic: bool = False
    mapping: Optional[MappingTable] = None

    @property
    def is_array(self) -> bool:
        return self.mapping is not None

    @property
    def input_type(self) -> str:
        # массив принимается в виде литерала массива PostgreSQL: '{1,2,3}'
        if self.is_array:
            return f"{self.sql_type}[]"
        return self.sql_type


@dataclass(frozen=True)
class StorageLayout:
    entity_name: str
    static_table: str
    version_table: str
    pointer_table: str
    unique_constraint: str
    properties: Tuple[StoredProperty, ...]
    identity: Tuple[StoredProperty, ...]

    @property
    def static_properties(self) -> Tuple[StoredProperty, ...]:
        return tuple(p for p in self.properties if not p.is_dynamic)

    @property
    def dynamic_properties(self) -> Tuple[StoredProperty, ...]:
        return tuple(p for p in self.properties if p.is_dynamic)

    @property
    def array_properties(self) -> Tuple[StoredProperty, ...]:
        return tuple(p for p in self.properties if p.is_array)

    @property
    def has_versions(self) -> bool:
        return bool(self.dynamic_properties)


def _stored_property(entity_name: str, name: str, definition: Any, unique: Tuple[str, ...]) -> StoredProperty:
    is_identity = name in unique
    is_dynamic = bool(property_flag(definition, "updatable")) and not is_identity
    default = property_flag(definition, "default")
    references = property_flag(definition, "references")
    check = property_flag(definition, "check")
    sql_type = definition.type

    if property_flag(definition, "array"):
        owner_table = version_table_name(entity_name) if is_dynamic else static_table_name(entity_name)
        owner_column = VERSION_ID_COLUMN if is_dynamic else STATIC_ID_COLUMN
        mapping = MappingTable(
            name=quote_identifier(mapping_table_name(owner_table, name)),
            owner_table=quote_identifier(owner_table),
            owner_column=owner_column,
            element_column=quote_identifier(element_column_name(name, owner_column)),
            element_type=sql_type,
            references=references,
            check=check,
        )
        return StoredProperty(
            name=name,
            sql_type=sql_type,
            column=quote_identifier(hash_column_name(name)),
            column_type=ARRAY_HASH_TYPE,
            input_name=input_name(name),
            value_expression=variable_name(hash_column_name(name)),
            is_identity=is_identity,
            is_dynamic=is_dynamic,
            mapping=mapping,
        )

    value_expression = input_name(name)
    if default is not None:
        value_expression = f"coalesce({value_expression}, {default})"

    return StoredProperty(
        name=name,
        sql_type=sql_type,
        column=quote_identifier(name),
        column_type=sql_type,
        input_name=input_name(name),
        value_expression=value_expression,
        nullable=bool(property_flag(definition, "nullable")),
        default=default,
        references=references,
        check=check,
        is_identity=is_identity,
        is_dynamic=is_dynamic,
    )


def derive_storage_layout(entity: Any) -> StorageLayout:
    """
    Строит раскладку хранения для проверенной сущности.
    Порядок свойств = порядок объявления (он же порядок колонок и параметров).
    """
    unique = tuple(entity.unique)
    properties = tuple(
        _stored_property(entity.name, name, definition, unique)
        for name, definition in entity.properties.items()
    )
    by_name = {p.name: p for p in properties}

    return StorageLayout(
        entity_name=entity.name,
        static_table=quote_identifier(static_table_name(entity.name)),
        version_table=quote_identifier(version_table_name(entity.name)),
        pointer_table=quote_identifier(pointer_table_name(entity.name)),
        unique_constraint=unique_constraint_name(entity.name),
        properties=properties,
        identity=tuple(by_name[name] for name in unique),
    )
