# schemagen/core/__init__.py

from .models import (
    Property,
    Entity,
    ValueObject,
)

from .properties import prop

from .exceptions import (
    SchemaGeneratorError,
    DeclarationError,
    MissingEntitiesExport,
    InvalidEntityType,
    ReservedPropertyName,
    NamingConventionViolation,
    UndeclaredUniqueProperty,
    NoUniqueDeterminant,
    GenerationError,
    SourceLoadingError,
)

__all__ = [
    # models
    "Property",
    "Entity",
    "ValueObject",
    "prop",

    # exceptions
    "SchemaGeneratorError",
    "DeclarationError",
    "MissingEntitiesExport",
    "InvalidEntityType",
    "ReservedPropertyName",
    "NamingConventionViolation",
    "UndeclaredUniqueProperty",
    "NoUniqueDeterminant",
    "GenerationError",
    "SourceLoadingError",
]
