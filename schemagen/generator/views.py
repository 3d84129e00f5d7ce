"""
Представление текущего состояния сущности: статическая строка +
версия, на которую указывает таблица указателей. Массивы собираются
обратно из таблиц связей в порядке array_order_index.
"""

from __future__ import annotations

from typing import Any, Dict, List

from schemagen.core.constants import (
    ARRAY_ORDER_INDEX_COLUMN,
    CREATED_AT_COLUMN,
    EFFECTIVE_AT_COLUMN,
    STATIC_ID_COLUMN,
    VERSION_ID_COLUMN,
)
from schemagen.utils.naming import current_view_name, quote_identifier

from .layout import StoredProperty, derive_storage_layout


def _select_item(prop: StoredProperty) -> List[str]:
    alias = "v" if prop.is_dynamic else "s"
    if not prop.is_array:
        return [f"{alias}.{prop.column}"]

    mapping = prop.mapping
    owner_id = VERSION_ID_COLUMN if prop.is_dynamic else STATIC_ID_COLUMN
    return [
        "(",
        f"  SELECT coalesce(array_agg(m.{mapping.element_column} ORDER BY m.{ARRAY_ORDER_INDEX_COLUMN}), '{{}}')",
        f"  FROM {mapping.name} m",
        f"  WHERE m.{mapping.owner_column} = {alias}.{owner_id}",
        f") AS {quote_identifier(prop.name)}",
    ]


def generate_entity_current_view(entity: Any) -> Dict[str, str]:
    layout = derive_storage_layout(entity)

    items: List[List[str]] = [[f"s.{STATIC_ID_COLUMN}"]]
    items.extend(_select_item(p) for p in layout.properties)
    items.append([f"s.{CREATED_AT_COLUMN}"])
    if layout.has_versions:
        items.append([f"v.{EFFECTIVE_AT_COLUMN}"])

    select_lines: List[str] = []
    for i, item in enumerate(items):
        rendered = [f"    {line}" for line in item]
        if i < len(items) - 1:
            rendered[-1] += ","
        select_lines.extend(rendered)

    from_lines = [f"  FROM {layout.static_table} s"]
    if layout.has_versions:
        from_lines.append(f"  JOIN {layout.pointer_table} p ON p.{STATIC_ID_COLUMN} = s.{STATIC_ID_COLUMN}")
        from_lines.append(f"  JOIN {layout.version_table} v ON v.{VERSION_ID_COLUMN} = p.{VERSION_ID_COLUMN}")

    name = current_view_name(entity.name)
    sql = "\n".join([f"CREATE OR REPLACE VIEW {name} AS", "  SELECT", *select_lines, *from_lines])
    return {
        "name": name,
        "sql": sql,
    }
