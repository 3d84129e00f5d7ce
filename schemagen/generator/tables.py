"""
DDL таблиц, которые наполняет upsert-функция.

Порядок ресурсов учитывает внешние ключи:
  статическая таблица → её таблицы связей →
  таблица версий → её таблицы связей → таблица указателей.

Уникальное ограничение статической таблицы покрывает свойства unique
(для массивов — колонку хэша): при гонке двух вставок сохраняется
ровно одна статическая строка.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from schemagen.core.constants import (
    ARRAY_ORDER_INDEX_COLUMN,
    CREATED_AT_COLUMN,
    EFFECTIVE_AT_COLUMN,
    STATIC_ID_COLUMN,
    UPDATED_AT_COLUMN,
    VERSION_ID_COLUMN,
)
from schemagen.utils.naming import (
    check_constraint_name,
    foreign_key_name,
    primary_key_name,
    quote_identifier,
    static_table_name,
)

from .layout import MappingTable, StorageLayout, StoredProperty, derive_storage_layout

_TIMESTAMP_DEFAULT = "timestamptz NOT NULL DEFAULT now()"


def _bare(identifier: str) -> str:
    return identifier.strip('"')


def _column_definition(prop: StoredProperty) -> str:
    parts = [prop.column, prop.column_type]
    if prop.is_array or not prop.nullable:
        parts.append("NOT NULL")
    if prop.default is not None and not prop.is_array:
        parts.append(f"DEFAULT {prop.default}")
    return " ".join(parts)


def _check_definition(table: str, column: str, check: str) -> str:
    expression = check.replace("$COLUMN_NAME", column)
    return f"CONSTRAINT {check_constraint_name(_bare(table), _bare(column))} CHECK ({expression})"


def _render_table(name: str, elements: List[str]) -> Dict[str, str]:
    body = ",\n".join(f"  {e}" for e in elements)
    return {
        "name": _bare(name),
        "sql": f"CREATE TABLE IF NOT EXISTS {name} (\n{body}\n)",
    }


def _foreign_keys(table: str, references: List[tuple]) -> List[str]:
    """references: [(column, referenced_table, referenced_column), ...]"""
    return [
        f"CONSTRAINT {foreign_key_name(_bare(table), i)} FOREIGN KEY ({column}) "
        f"REFERENCES {target} ({target_column})"
        for i, (column, target, target_column) in enumerate(references)
    ]


def _owned_properties_table(
    table: str,
    leading_columns: List[str],
    properties: List[StoredProperty],
    primary_key: str,
    leading_references: List[tuple],
) -> Tuple[List[str], List[str], List[tuple], List[str]]:
    columns = leading_columns + [_column_definition(p) for p in properties]
    constraints = [f"CONSTRAINT {primary_key_name(_bare(table))} PRIMARY KEY ({primary_key})"]

    references = list(leading_references)
    references.extend(
        (p.column, quote_identifier(static_table_name(p.references)), STATIC_ID_COLUMN)
        for p in properties
        if p.references and not p.is_array
    )
    checks = [
        _check_definition(table, p.column, p.check)
        for p in properties
        if p.check and not p.is_array
    ]
    return columns, constraints, references, checks


def _static_table(layout: StorageLayout) -> Dict[str, str]:
    table = layout.static_table
    columns, constraints, references, checks = _owned_properties_table(
        table,
        [
            f"{STATIC_ID_COLUMN} bigserial NOT NULL",
            f"{CREATED_AT_COLUMN} {_TIMESTAMP_DEFAULT}",
        ],
        list(layout.static_properties),
        STATIC_ID_COLUMN,
        [],
    )
    # NULLS NOT DISTINCT (PostgreSQL 15+): иначе NULL в unique допускает дубликаты
    nulls = " NULLS NOT DISTINCT" if any(p.nullable for p in layout.identity) else ""
    identity_columns = ", ".join(p.column for p in layout.identity)
    constraints.append(f"CONSTRAINT {layout.unique_constraint} UNIQUE{nulls} ({identity_columns})")
    return _render_table(table, columns + constraints + _foreign_keys(table, references) + checks)


def _version_table(layout: StorageLayout) -> Dict[str, str]:
    table = layout.version_table
    columns, constraints, references, checks = _owned_properties_table(
        table,
        [
            f"{VERSION_ID_COLUMN} bigserial NOT NULL",
            f"{STATIC_ID_COLUMN} bigint NOT NULL",
            f"{EFFECTIVE_AT_COLUMN} {_TIMESTAMP_DEFAULT}",
            f"{CREATED_AT_COLUMN} {_TIMESTAMP_DEFAULT}",
        ],
        list(layout.dynamic_properties),
        VERSION_ID_COLUMN,
        [(STATIC_ID_COLUMN, layout.static_table, STATIC_ID_COLUMN)],
    )
    return _render_table(table, columns + constraints + _foreign_keys(table, references) + checks)


def _pointer_table(layout: StorageLayout) -> Dict[str, str]:
    table = layout.pointer_table
    elements = [
        f"{STATIC_ID_COLUMN} bigint NOT NULL",
        f"{VERSION_ID_COLUMN} bigint NOT NULL",
        f"{UPDATED_AT_COLUMN} {_TIMESTAMP_DEFAULT}",
        f"CONSTRAINT {primary_key_name(_bare(table))} PRIMARY KEY ({STATIC_ID_COLUMN})",
    ]
    elements.extend(_foreign_keys(table, [
        (STATIC_ID_COLUMN, layout.static_table, STATIC_ID_COLUMN),
        (VERSION_ID_COLUMN, layout.version_table, VERSION_ID_COLUMN),
    ]))
    return _render_table(table, elements)


def _mapping_table(mapping: MappingTable) -> Dict[str, str]:
    table = mapping.name
    elements = [
        f"{mapping.owner_column} bigint NOT NULL",
        f"{mapping.element_column} {mapping.element_type} NOT NULL",
        f"{ARRAY_ORDER_INDEX_COLUMN} int NOT NULL",
        f"CONSTRAINT {primary_key_name(_bare(table))} PRIMARY KEY ({mapping.owner_column}, {ARRAY_ORDER_INDEX_COLUMN})",
    ]
    references = [(mapping.owner_column, mapping.owner_table, mapping.owner_column)]
    if mapping.references:
        references.append((mapping.element_column, quote_identifier(static_table_name(mapping.references)), STATIC_ID_COLUMN))
    elements.extend(_foreign_keys(table, references))
    if mapping.check:
        elements.append(_check_definition(table, mapping.element_column, mapping.check))
    return _render_table(table, elements)


def generate_entity_tables(entity: Any) -> List[Dict[str, str]]:
    """Список {name, sql} в порядке создания."""
    layout = derive_storage_layout(entity)

    resources = [_static_table(layout)]
    resources.extend(_mapping_table(p.mapping) for p in layout.static_properties if p.is_array)

    if layout.has_versions:
        resources.append(_version_table(layout))
        resources.extend(_mapping_table(p.mapping) for p in layout.dynamic_properties if p.is_array)
        resources.append(_pointer_table(layout))

    return resources


__all__ = [
    "generate_entity_tables",
]
