"""
Блок вставки новой версии при изменении динамических данных.

Единственный шлюз изменения: новая версия появляется, только если у
статической сущности нет текущей версии или хотя бы одно динамическое
значение (включая хэши массивов) отличается от текущей версии.
"""

from __future__ import annotations

from typing import List, Optional

from schemagen.core.constants import STATIC_ID_COLUMN, VERSION_ID_COLUMN

from ..layout import StorageLayout
from .common import mapping_insert_lines, match_condition, nest, where_clause
from .variables import UpsertVariables


def define_insert_version_if_dynamic_data_changed_logic(
    layout: StorageLayout,
    variables: UpsertVariables,
) -> Optional[str]:
    if not layout.has_versions:
        return None

    dynamic = layout.dynamic_properties
    conditions = [f"p.{STATIC_ID_COLUMN} = {variables.static_id}"]
    conditions.extend(match_condition("v", p, null_safe=True) for p in dynamic)

    lines: List[str] = [
        "-- lock the static entity so concurrent upserts compare versions one at a time",
        f"PERFORM 1 FROM {layout.static_table} s WHERE s.{STATIC_ID_COLUMN} = {variables.static_id} FOR UPDATE;",
        "",
        "-- find the current version, if its dynamic data matches the input",
        f"SELECT v.{VERSION_ID_COLUMN} INTO {variables.matching_version_id}",
        f"FROM {layout.pointer_table} p",
        f"JOIN {layout.version_table} v ON v.{VERSION_ID_COLUMN} = p.{VERSION_ID_COLUMN}",
        *where_clause(conditions),
    ]
    lines[-1] += ";"
    lines.append("")

    columns = [STATIC_ID_COLUMN] + [p.column for p in dynamic]
    values = [variables.static_id] + [p.value_expression for p in dynamic]
    insert_lines = [
        f"INSERT INTO {layout.version_table} ({', '.join(columns)})",
        f"VALUES ({', '.join(values)})",
        f"RETURNING {VERSION_ID_COLUMN} INTO {variables.new_version_id};",
    ]
    dynamic_arrays = [p for p in dynamic if p.is_array]
    if dynamic_arrays:
        insert_lines.append("")
        insert_lines.append("-- record the array elements in their mapping tables")
        for p in dynamic_arrays:
            insert_lines.extend(mapping_insert_lines(p, variables.new_version_id, variables.array_index))

    lines.append("-- insert a new version if there is no current version or its dynamic data changed")
    lines.append(f"IF ({variables.matching_version_id} IS NULL) THEN")
    lines.extend(nest(insert_lines))
    lines.append("END IF;")

    return "\n".join(lines)
