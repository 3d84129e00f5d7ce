"""
Нормализатор деклараций.

Инварианты:
- без массива entities — MissingEntitiesExport
- элемент без структуры Entity — InvalidEntityType, до применения правил
- правила применяются сущность за сущностью, D1 → D2 → D3 → D4
- первое нарушение прерывает пачку (fail-fast)
- успешный результат — те же сущности без изменений
"""

from types import SimpleNamespace

import pytest

from schemagen.core import (
    Entity,
    InvalidEntityType,
    MissingEntitiesExport,
    NamingConventionViolation,
    NoUniqueDeterminant,
    ReservedPropertyName,
    UndeclaredUniqueProperty,
    prop,
)
from schemagen.normalization import DeclarationNormalizer, normalize_declaration_contents


class TestEntitiesExport:

    def test_missing_entities_key(self):
        with pytest.raises(MissingEntitiesExport) as exc_info:
            normalize_declaration_contents({})
        assert exc_info.value.message == "an entities array must be exported by the source file"

    def test_missing_entities_attribute(self):
        with pytest.raises(MissingEntitiesExport):
            normalize_declaration_contents(SimpleNamespace(other=[]))

    def test_entities_none(self):
        with pytest.raises(MissingEntitiesExport):
            normalize_declaration_contents({"entities": None})

    def test_entities_not_an_array(self, user_entity):
        with pytest.raises(MissingEntitiesExport):
            normalize_declaration_contents({"entities": user_entity})

    def test_module_like_contents(self, user_entity):
        contents = SimpleNamespace(entities=[user_entity])
        assert normalize_declaration_contents(contents) == {"entities": [user_entity]}

    def test_empty_entities_array_is_valid(self):
        assert normalize_declaration_contents({"entities": []}) == {"entities": []}


class TestEntityShape:

    def test_empty_dict_element(self):
        with pytest.raises(InvalidEntityType) as exc_info:
            normalize_declaration_contents({"entities": [{}]})
        assert exc_info.value.message == "all exported entities must be of, or extend, class Entity"
        assert exc_info.value.details == {}

    def test_dict_with_entity_keys_is_not_an_entity(self):
        element = {"name": "user", "properties": {"email": prop.VARCHAR(255)}, "unique": ["email"]}
        with pytest.raises(InvalidEntityType):
            normalize_declaration_contents({"entities": [element]})

    def test_property_without_type(self):
        element = SimpleNamespace(name="user", properties={"email": object()}, unique=["email"])
        with pytest.raises(InvalidEntityType):
            normalize_declaration_contents({"entities": [element]})

    def test_unique_must_be_a_sequence_of_names(self):
        element = SimpleNamespace(name="user", properties={"email": prop.VARCHAR(255)}, unique="email")
        with pytest.raises(InvalidEntityType):
            normalize_declaration_contents({"entities": [element]})

    def test_duck_typed_entity_accepted(self, duck_entity):
        result = normalize_declaration_contents({"entities": [duck_entity]})
        assert result["entities"][0] is duck_entity

    def test_shape_is_checked_before_any_rule(self):
        broken_rules = Entity(name="user", properties={"id": prop.BIGINT()}, unique=["email"])
        with pytest.raises(InvalidEntityType):
            normalize_declaration_contents({"entities": [broken_rules, {}]})


class TestRules:

    def test_valid_entity_passes_through_unchanged(self, user_entity):
        entities = [user_entity]
        result = normalize_declaration_contents({"entities": entities})
        assert result == {"entities": [user_entity]}
        assert result["entities"] is entities

    def test_undeclared_unique_property(self):
        entity = Entity(name="user", properties={"id": prop.BIGINT()}, unique=["email"])
        with pytest.raises(UndeclaredUniqueProperty) as exc_info:
            normalize_declaration_contents({"entities": [entity]})
        assert exc_info.value.message == (
            "entity 'user' was defined to be unique on 'email' "
            "but does not have that defined in its properties"
        )
        assert exc_info.value.entity_name == "user"
        assert exc_info.value.property_name == "email"

    def test_unique_names_are_case_sensitive(self):
        entity = Entity(name="user", properties={"email": prop.VARCHAR(255)}, unique=["Email"])
        with pytest.raises(UndeclaredUniqueProperty):
            normalize_declaration_contents({"entities": [entity]})

    def test_empty_unique(self):
        entity = Entity(name="user", properties={"email": prop.VARCHAR(255)}, unique=[])
        with pytest.raises(NoUniqueDeterminant) as exc_info:
            normalize_declaration_contents({"entities": [entity]})
        assert exc_info.value.entity_name == "user"
        assert "'user'" in str(exc_info.value)

    def test_reserved_property_name(self):
        entity = Entity(name="user", properties={"created_at": prop.TIMESTAMPTZ()}, unique=["created_at"])
        with pytest.raises(ReservedPropertyName) as exc_info:
            normalize_declaration_contents({"entities": [entity]})
        assert exc_info.value.property_name == "created_at"

    def test_naming_convention(self):
        entity = Entity(name="User", properties={"email": prop.VARCHAR(255)}, unique=["email"])
        with pytest.raises(NamingConventionViolation):
            normalize_declaration_contents({"entities": [entity]})

    def test_entity_name_with_trailing_newline(self):
        entity = Entity(name="user\n", properties={"email": prop.VARCHAR(255)}, unique=["email"])
        with pytest.raises(NamingConventionViolation):
            normalize_declaration_contents({"entities": [entity]})

    def test_property_name_with_trailing_newline(self):
        entity = Entity(name="user", properties={"email\n": prop.VARCHAR(255)}, unique=["email\n"])
        with pytest.raises(NamingConventionViolation) as exc_info:
            normalize_declaration_contents({"entities": [entity]})
        assert exc_info.value.property_name == "email\n"

    def test_property_taking_array_hash_column_name(self):
        entity = Entity(
            name="post",
            properties={
                "slug": prop.VARCHAR(128),
                "tags": prop.ARRAY_OF(prop.TEXT()),
                "tags_hash": prop.TEXT(),
            },
            unique=["slug"],
        )
        with pytest.raises(ReservedPropertyName) as exc_info:
            normalize_declaration_contents({"entities": [entity]})
        assert exc_info.value.property_name == "tags_hash"


class TestFailFast:

    def test_rule_order_within_entity(self):
        # нарушены D1, D3 и D4 одновременно: срабатывает D1
        entity = Entity(name="user", properties={"static_id": prop.BIGINT()}, unique=["email"])
        with pytest.raises(ReservedPropertyName):
            normalize_declaration_contents({"entities": [entity]})

    def test_entity_order_before_rule_order(self):
        # первая сущность нарушает D3, вторая D1: побеждает первая
        first = Entity(name="user", properties={"id": prop.BIGINT()}, unique=["email"])
        second = Entity(name="post", properties={"version_id": prop.BIGINT()}, unique=["version_id"])
        with pytest.raises(UndeclaredUniqueProperty) as exc_info:
            normalize_declaration_contents({"entities": [first, second]})
        assert exc_info.value.entity_name == "user"

    def test_first_error_only(self):
        first = Entity(name="user", properties={"id": prop.BIGINT()}, unique=[])
        second = Entity(name="post", properties={"id": prop.BIGINT()}, unique=["missing"])
        with pytest.raises(NoUniqueDeterminant) as exc_info:
            normalize_declaration_contents({"entities": [first, second]})
        assert exc_info.value.entity_name == "user"


class TestIdempotence:

    def test_normalizing_twice(self, user_entity, profile_entity, address_value_object):
        once = normalize_declaration_contents({"entities": [user_entity, profile_entity, address_value_object]})
        twice = normalize_declaration_contents(once)
        assert once == twice


class TestConfiguration:

    def test_custom_reserved_names(self, user_entity):
        normalizer = DeclarationNormalizer({"rules": {"D1": {"reserved_names": ["email"]}}})
        with pytest.raises(ReservedPropertyName) as exc_info:
            normalizer.normalize({"entities": [user_entity]})
        assert exc_info.value.property_name == "email"

    def test_disabled_rule(self):
        entity = Entity(name="user", properties={"created_at": prop.TIMESTAMPTZ()}, unique=["created_at"])
        normalizer = DeclarationNormalizer()
        normalizer.registry.get_rule("D1").disable()
        assert normalizer.normalize({"entities": [entity]}) == {"entities": [entity]}
