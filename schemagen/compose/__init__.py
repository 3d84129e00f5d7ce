# __init__.py для пакета compose
"""
Пакет compose: генерация всей схемы из исходного файла деклараций.

- load_declaration_contents — загрузка исходного файла
- SchemaCompiler — конвейер нормализация → генерация
- order_by_references — порядок создания: сначала сущности, на которые ссылаются
- SchemaWriter — запись ресурсов на диск
"""

from .loader import load_declaration_contents
from .compiler import CompiledSchema, SchemaCompiler, SchemaResource
from .ordering import order_by_references
from .writer import SchemaWriter

__all__ = [
    "load_declaration_contents",
    "CompiledSchema",
    "SchemaCompiler",
    "SchemaResource",
    "order_by_references",
    "SchemaWriter",
]
