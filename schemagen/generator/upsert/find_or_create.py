"""
Блок поиска или создания статической сущности.

1. хэш каждого свойства-массива вычисляется один раз
2. поиск статической строки по уникальным свойствам (массивы — по хэшу)
3. если не найдена: вставка статической строки и строк таблиц связей
   во вложенном блоке; проигравший гонку параллельный вызов получает
   unique_violation и перечитывает уже созданную строку
"""

from __future__ import annotations

from typing import List

from schemagen.core.constants import STATIC_ID_COLUMN

from ..layout import StorageLayout
from .common import hash_assignment, mapping_insert_lines, match_condition, nest, where_clause
from .variables import UpsertVariables


def _find_static_lines(layout: StorageLayout, variables: UpsertVariables) -> List[str]:
    conditions = [
        match_condition("s", p, null_safe=p.nullable)
        for p in layout.identity
    ]
    return [
        f"SELECT s.{STATIC_ID_COLUMN} INTO {variables.static_id}",
        f"FROM {layout.static_table} s",
        *where_clause(conditions),
    ]


def define_find_or_create_static_entity_logic(layout: StorageLayout, variables: UpsertVariables) -> str:
    lines: List[str] = []

    if layout.array_properties:
        lines.append("-- calculate the content hash of each array property")
        lines.extend(
            hash_assignment(p, variables.array_hashes[p.name])
            for p in layout.array_properties
        )
        lines.append("")

    find_lines = _find_static_lines(layout, variables)
    find_lines[-1] += ";"
    lines.append("-- find the static entity by its unique properties")
    lines.extend(find_lines)
    lines.append("")

    static = layout.static_properties
    insert_lines = [
        f"INSERT INTO {layout.static_table} ({', '.join(p.column for p in static)})",
        f"VALUES ({', '.join(p.value_expression for p in static)})",
        f"RETURNING {STATIC_ID_COLUMN} INTO {variables.static_id};",
    ]
    static_arrays = [p for p in static if p.is_array]
    if static_arrays:
        insert_lines.append("")
        insert_lines.append("-- record the array elements in their mapping tables")
        for p in static_arrays:
            insert_lines.extend(mapping_insert_lines(p, variables.static_id, variables.array_index))

    reread_lines = ["-- a concurrent upsert created the same static entity first"]
    reread_lines.extend(find_lines)

    lines.append("-- create the static entity if it does not exist yet")
    lines.append(f"IF ({variables.static_id} IS NULL) THEN")
    lines.extend(nest(["BEGIN"]))
    lines.extend(nest(insert_lines, 2))
    lines.extend(nest(["EXCEPTION WHEN unique_violation THEN"]))
    lines.extend(nest(reread_lines, 2))
    lines.extend(nest(["END;"]))
    lines.append("END IF;")

    return "\n".join(lines)
