"""
Пакет utils: вспомогательные утилиты генератора схемы.

Содержит чистые функции без побочных эффектов, используемые
различными слоями системы (rules, normalization, generator).

Состав пакета:
- naming: производные имена таблиц, колонок и переменных
- validators: структурные проверки деклараций
"""

from .naming import (
    quote_identifier,
    static_table_name,
    version_table_name,
    pointer_table_name,
    mapping_table_name,
    hash_column_name,
    element_column_name,
    input_name,
    variable_name,
    upsert_function_name,
    current_view_name,
    unique_constraint_name,
)

from .validators import (
    conforms_to_property_shape,
    conforms_to_entity_shape,
    property_flag,
)

__all__ = [
    # naming
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

    # validators
    "conforms_to_property_shape",
    "conforms_to_entity_shape",
    "property_flag",
]
