"""
Общие строительные блоки фрагментов upsert-функции.
Все функции чистые и возвращают списки строк без завершающих переводов.
"""

from __future__ import annotations

from typing import Iterable, List

from schemagen.core.constants import ARRAY_HASH_ALGORITHM, ARRAY_ORDER_INDEX_COLUMN

from ..layout import StoredProperty

_STEP = "  "


def nest(lines: Iterable[str], depth: int = 1) -> List[str]:
    prefix = _STEP * depth
    return [prefix + line if line else line for line in lines]


def hash_assignment(prop: StoredProperty, variable: str) -> str:
    """
    Хэш содержимого массива.

    Хэшируется текстовый литерал массива PostgreSQL, поэтому порядок
    элементов значим, а кавычки элементов различают {"a,b"} и {a,b}.
    NULL приравнивается к пустому массиву. sha256() встроена в PostgreSQL 11+.
    """
    return (
        f"{variable} := encode({ARRAY_HASH_ALGORITHM}(convert_to(coalesce({prop.input_name}, '{{}}')::text, 'UTF8')), "
        f"'hex');"
    )


def match_condition(alias: str, prop: StoredProperty, null_safe: bool) -> str:
    column = f"{alias}.{prop.column}"
    if null_safe:
        return f"{column} IS NOT DISTINCT FROM {prop.value_expression}"
    return f"{column} = {prop.value_expression}"


def where_clause(conditions: List[str]) -> List[str]:
    if not conditions:
        return []
    return [f"WHERE {conditions[0]}"] + [f"{_STEP}AND {c}" for c in conditions[1:]]


def mapping_insert_lines(prop: StoredProperty, owner_id_variable: str, index_variable: str) -> List[str]:
    """Одна строка таблицы связей на каждый элемент входного массива."""
    mapping = prop.mapping
    return [
        f"FOR {index_variable} IN 1 .. coalesce(array_length({prop.input_name}, 1), 0) LOOP",
        f"{_STEP}INSERT INTO {mapping.name} ({mapping.owner_column}, {mapping.element_column}, {ARRAY_ORDER_INDEX_COLUMN})",
        f"{_STEP}VALUES ({owner_id_variable}, {prop.input_name}[{index_variable}], {index_variable});",
        "END LOOP;",
    ]
