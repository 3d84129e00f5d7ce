"""
Фабрики определений свойств.

Пример:
    from schemagen.core.properties import prop

    user = Entity(
        name="user",
        properties={
            "email": prop.VARCHAR(255),
            "name": prop.VARCHAR(255, updatable=True),
            "tag_ids": prop.ARRAY_OF(prop.REFERENCES("tag")),
        },
        unique=["email"],
    )
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from .models import Entity, Property


def _property(sql_type: str, **overrides: Any) -> Property:
    return Property(type=sql_type, **overrides)


def BIGINT(**overrides: Any) -> Property:
    return _property("bigint", **overrides)


def INT(**overrides: Any) -> Property:
    return _property("int", **overrides)


def NUMERIC(precision: int, scale: int = 0, **overrides: Any) -> Property:
    return _property(f"numeric({precision}, {scale})", **overrides)


def VARCHAR(length: int, **overrides: Any) -> Property:
    return _property(f"varchar({length})", **overrides)


def TEXT(**overrides: Any) -> Property:
    return _property("text", **overrides)


def BOOLEAN(**overrides: Any) -> Property:
    return _property("boolean", **overrides)


def UUID(**overrides: Any) -> Property:
    return _property("uuid", **overrides)


def DATE(**overrides: Any) -> Property:
    return _property("date", **overrides)


def TIMESTAMPTZ(**overrides: Any) -> Property:
    return _property("timestamptz", **overrides)


def JSONB(**overrides: Any) -> Property:
    return _property("jsonb", **overrides)


def ENUM(values: Iterable[str], **overrides: Any) -> Property:
    """varchar с CHECK на допустимые значения."""
    values = list(values)
    length = max((len(v) for v in values), default=1)
    quoted = ", ".join("'" + v.replace("'", "''") + "'" for v in values)
    overrides.setdefault("check", f"$COLUMN_NAME IN ({quoted})")
    return _property(f"varchar({length})", **overrides)


def REFERENCES(entity: Union[Entity, str], **overrides: Any) -> Property:
    """Внешний ключ на static_id другой сущности."""
    name = entity if isinstance(entity, str) else entity.name
    return _property("bigint", references=name, **overrides)


def ARRAY_OF(element: Property, **overrides: Any) -> Property:
    """Массив значений типа element; хранится через хэш + таблицу связей."""
    return Property(
        type=element.type,
        updatable=overrides.get("updatable", element.updatable),
        nullable=overrides.get("nullable", element.nullable),
        default=overrides.get("default", element.default),
        references=element.references,
        check=element.check,
        array=True,
    )


class prop:
    """Пространство имён фабрик: prop.VARCHAR(255), prop.ARRAY_OF(...)."""

    BIGINT = staticmethod(BIGINT)
    INT = staticmethod(INT)
    NUMERIC = staticmethod(NUMERIC)
    VARCHAR = staticmethod(VARCHAR)
    TEXT = staticmethod(TEXT)
    BOOLEAN = staticmethod(BOOLEAN)
    UUID = staticmethod(UUID)
    DATE = staticmethod(DATE)
    TIMESTAMPTZ = staticmethod(TIMESTAMPTZ)
    JSONB = staticmethod(JSONB)
    ENUM = staticmethod(ENUM)
    REFERENCES = staticmethod(REFERENCES)
    ARRAY_OF = staticmethod(ARRAY_OF)
