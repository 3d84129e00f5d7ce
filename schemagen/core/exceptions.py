"""
Пользовательские исключения генератора схемы.
"""

from __future__ import annotations
from typing import Optional, Dict, Any

from .constants import ERROR_CODES


class SchemaGeneratorError(Exception):
    """Базовое исключение генератора схемы."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: Optional[dict] = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "code": self.code,
            "error_code": ERROR_CODES.get(self.code, ERROR_CODES["UNKNOWN_ERROR"]),
            "details": self.details,
        }


class DeclarationError(SchemaGeneratorError):
    """
    Ошибка валидации деклараций сущностей.

    Любая такая ошибка фатальна для всей пачки: нормализация
    прерывается на первой же найденной.
    """

    def __init__(
        self,
        message: str,
        code: str,
        entity_name: str = None,
        property_name: str = None,
    ):
        details: Dict[str, Any] = {}
        if entity_name:
            details["entity_name"] = entity_name
        if property_name:
            details["property_name"] = property_name
        super().__init__(message, code, details)
        self.entity_name = entity_name
        self.property_name = property_name


class MissingEntitiesExport(DeclarationError):
    """Исходный файл не экспортирует массив entities."""

    def __init__(self):
        super().__init__(
            "an entities array must be exported by the source file",
            "MISSING_ENTITIES_EXPORT",
        )


class InvalidEntityType(DeclarationError):
    """Элемент entities не обладает структурой Entity."""

    def __init__(self):
        super().__init__(
            "all exported entities must be of, or extend, class Entity",
            "INVALID_ENTITY_TYPE",
        )


class ReservedPropertyName(DeclarationError):
    """Свойство использует имя, зарезервированное генератором."""

    def __init__(self, entity_name: str, property_name: str):
        super().__init__(
            f"entity '{entity_name}' defines property '{property_name}' "
            f"but '{property_name}' is a reserved name",
            "RESERVED_PROPERTY_NAME",
            entity_name=entity_name,
            property_name=property_name,
        )


class NamingConventionViolation(DeclarationError):
    """Имя сущности или свойства не соответствует соглашению."""

    def __init__(self, entity_name: str, reason: str, property_name: str = None):
        if property_name:
            message = f"entity '{entity_name}' property '{property_name}' {reason}"
        else:
            message = f"entity name '{entity_name}' {reason}"
        super().__init__(
            message,
            "NAMING_CONVENTION_VIOLATION",
            entity_name=entity_name,
            property_name=property_name,
        )
        self.reason = reason


class UndeclaredUniqueProperty(DeclarationError):
    """Имя из unique отсутствует в properties."""

    def __init__(self, entity_name: str, property_name: str):
        super().__init__(
            f"entity '{entity_name}' was defined to be unique on '{property_name}' "
            f"but does not have that defined in its properties",
            "UNDECLARED_UNIQUE_PROPERTY",
            entity_name=entity_name,
            property_name=property_name,
        )


class NoUniqueDeterminant(DeclarationError):
    """Сущность не уникальна ни по одному свойству."""

    def __init__(self, entity_name: str):
        super().__init__(
            f"entity '{entity_name}' must be unique on at least one property",
            "NO_UNIQUE_DETERMINANT",
            entity_name=entity_name,
        )


class GenerationError(SchemaGeneratorError):
    """
    Дефект генерации.

    Возникает при нарушении контракта нормализатора (на вход генератора
    попала непроверенная сущность), при ошибке в самих построителях
    фрагментов и при цикле ссылок между сущностями, для которого нет
    порядка создания таблиц.
    """

    def __init__(self, message: str, resource_name: str = None):
        details: Dict[str, Any] = {}
        if resource_name:
            details["resource_name"] = resource_name
        super().__init__(message, "GENERATION_ERROR", details)


class SourceLoadingError(SchemaGeneratorError):
    """Не удалось загрузить исходный файл деклараций."""

    def __init__(self, message: str, file_path: str = None):
        details: Dict[str, Any] = {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, "SOURCE_LOADING_ERROR", details)


def handle_exception(exception: Exception) -> dict:
    if isinstance(exception, SchemaGeneratorError):
        return exception.to_dict()
    return {
        "error": str(exception),
        "code": "UNKNOWN_ERROR",
        "error_code": ERROR_CODES["UNKNOWN_ERROR"],
        "details": {
            "exception_type": exception.__class__.__name__,
        },
    }
