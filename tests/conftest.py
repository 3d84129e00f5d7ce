"""
Общие фикстуры: типовые декларации сущностей.
"""

from types import SimpleNamespace

import pytest

from schemagen.core import Entity, ValueObject, prop


@pytest.fixture
def user_entity():
    """Только статические свойства, уникальна по email."""
    return Entity(
        name="user",
        properties={
            "id": prop.BIGINT(),
            "email": prop.VARCHAR(255),
        },
        unique=["email"],
    )


@pytest.fixture
def profile_entity():
    """Статические и динамические свойства, массивы в обеих ролях."""
    return Entity(
        name="profile",
        properties={
            "handle": prop.VARCHAR(64),
            "tag_ids": prop.ARRAY_OF(prop.REFERENCES("tag")),
            "display_name": prop.VARCHAR(255, updatable=True),
            "bio": prop.TEXT(updatable=True, nullable=True),
            "role_ids": prop.ARRAY_OF(prop.REFERENCES("role"), updatable=True),
        },
        unique=["handle", "tag_ids"],
    )


@pytest.fixture
def address_value_object():
    return ValueObject(
        name="address",
        properties={
            "street": prop.VARCHAR(255),
            "city": prop.VARCHAR(255),
            "postal_code": prop.VARCHAR(16, nullable=True),
        },
    )


@pytest.fixture
def duck_entity():
    """Объект со структурой Entity, созданный без класса Entity."""
    return SimpleNamespace(
        name="device",
        properties={
            "serial": SimpleNamespace(type="varchar(32)"),
            "label": SimpleNamespace(type="text", updatable=True),
        },
        unique=["serial"],
    )
