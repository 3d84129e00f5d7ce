"""
generator — генерация SQL по проверенной декларации сущности.

Экспортирует:
- generate_entity_upsert: upsert-функция {name, sql}
- generate_entity_tables: DDL таблиц [{name, sql}, ...]
- generate_entity_current_view: представление текущего состояния {name, sql}
- derive_storage_layout / StorageLayout: раскладка хранения
- FunctionDefinition / FunctionRenderer: промежуточное представление функции
"""

from .layout import MappingTable, StorageLayout, StoredProperty, derive_storage_layout
from .function_ir import FunctionDefinition
from .renderer import FunctionRenderer
from .upsert import define_entity_upsert, generate_entity_upsert
from .tables import generate_entity_tables
from .views import generate_entity_current_view

__all__ = [
    "MappingTable",
    "StorageLayout",
    "StoredProperty",
    "derive_storage_layout",
    "FunctionDefinition",
    "FunctionRenderer",
    "define_entity_upsert",
    "generate_entity_upsert",
    "generate_entity_tables",
    "generate_entity_current_view",
]
