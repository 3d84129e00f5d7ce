"""
Правила D1–D4 и реестр правил.
"""

from types import SimpleNamespace

import pytest

from schemagen.core import (
    Entity,
    NamingConventionViolation,
    NoUniqueDeterminant,
    ReservedPropertyName,
    UndeclaredUniqueProperty,
    prop,
)
from schemagen.rules import (
    DEFAULT_RULES,
    BaseDeclarationRule,
    RuleD1,
    RuleD2,
    RuleD3,
    RuleD4,
    RuleRegistry,
)


def _entity(name="user", properties=None, unique=("email",)):
    return Entity(
        name=name,
        properties=properties if properties is not None else {"email": prop.VARCHAR(255)},
        unique=list(unique),
    )


class TestRuleD1:

    @pytest.fixture
    def rule(self):
        return RuleD1()

    @pytest.mark.parametrize("name", [
        "static_id", "version_id", "created_at", "effective_at", "updated_at", "array_order_index",
    ])
    def test_reserved_names(self, rule, name):
        entity = _entity(properties={name: prop.BIGINT()}, unique=[name])
        with pytest.raises(ReservedPropertyName) as exc_info:
            rule.check(entity)
        assert exc_info.value.message == (
            f"entity 'user' defines property '{name}' but '{name}' is a reserved name"
        )

    def test_id_is_not_reserved(self, rule):
        rule.check(_entity(properties={"id": prop.BIGINT()}, unique=["id"]))

    def test_array_hash_column_name_is_reserved(self, rule):
        entity = _entity(properties={
            "email": prop.VARCHAR(255),
            "tags": prop.ARRAY_OF(prop.TEXT()),
            "tags_hash": prop.TEXT(),
        })
        with pytest.raises(ReservedPropertyName) as exc_info:
            rule.check(entity)
        assert exc_info.value.property_name == "tags_hash"

    def test_hash_suffix_without_matching_array(self, rule):
        rule.check(_entity(properties={"email": prop.VARCHAR(255), "tags_hash": prop.TEXT()}))

    def test_configured_reserved_names(self):
        rule = RuleD1({"reserved_names": ["email"]})
        with pytest.raises(ReservedPropertyName):
            rule.check(_entity())


class TestRuleD2:

    @pytest.fixture
    def rule(self):
        return RuleD2()

    def test_valid_names(self, rule, profile_entity):
        rule.check(profile_entity)

    def test_entity_name_not_snake_case(self, rule):
        with pytest.raises(NamingConventionViolation) as exc_info:
            rule.check(_entity(name="UserAccount"))
        assert exc_info.value.property_name is None
        assert exc_info.value.message.startswith("entity name 'UserAccount' does not match")

    def test_property_name_not_snake_case(self, rule):
        entity = _entity(properties={"emailAddress": prop.VARCHAR(255)}, unique=["emailAddress"])
        with pytest.raises(NamingConventionViolation) as exc_info:
            rule.check(entity)
        assert exc_info.value.property_name == "emailAddress"

    def test_name_starting_with_digit(self, rule):
        with pytest.raises(NamingConventionViolation):
            rule.check(_entity(name="1user"))

    def test_entity_name_with_trailing_newline(self, rule):
        with pytest.raises(NamingConventionViolation) as exc_info:
            rule.check(_entity(name="user\n"))
        assert exc_info.value.property_name is None

    def test_property_name_with_trailing_newline(self, rule):
        entity = _entity(properties={"email\n": prop.VARCHAR(255)}, unique=["email\n"])
        with pytest.raises(NamingConventionViolation) as exc_info:
            rule.check(entity)
        assert exc_info.value.property_name == "email\n"

    def test_name_too_long(self, rule):
        name = "a" * 49
        with pytest.raises(NamingConventionViolation) as exc_info:
            rule.check(_entity(properties={name: prop.TEXT()}, unique=[name]))
        assert exc_info.value.reason == "is longer than 48 characters"

    def test_name_at_max_length(self, rule):
        name = "a" * 48
        rule.check(_entity(properties={name: prop.TEXT()}, unique=[name]))

    def test_reference_without_id_suffix(self, rule):
        entity = _entity(properties={"email": prop.VARCHAR(255), "owner": prop.REFERENCES("user")})
        with pytest.raises(NamingConventionViolation) as exc_info:
            rule.check(entity)
        assert exc_info.value.property_name == "owner"
        assert "'_id'" in exc_info.value.reason

    def test_reference_array_requires_ids_suffix(self, rule):
        entity = _entity(properties={
            "email": prop.VARCHAR(255),
            "tag_id": prop.ARRAY_OF(prop.REFERENCES("tag")),
        })
        with pytest.raises(NamingConventionViolation) as exc_info:
            rule.check(entity)
        assert "'_ids'" in exc_info.value.reason

    def test_reference_with_suffix(self, rule):
        rule.check(_entity(properties={
            "email": prop.VARCHAR(255),
            "owner_id": prop.REFERENCES("user"),
            "tag_ids": prop.ARRAY_OF(prop.REFERENCES("tag")),
        }))


class TestRuleD3:

    def test_all_unique_declared(self, user_entity):
        RuleD3().check(user_entity)

    def test_first_undeclared_name_reported(self):
        entity = _entity(unique=["email", "phone", "fax"])
        with pytest.raises(UndeclaredUniqueProperty) as exc_info:
            RuleD3().check(entity)
        assert exc_info.value.property_name == "phone"


class TestRuleD4:

    def test_empty_unique(self):
        with pytest.raises(NoUniqueDeterminant) as exc_info:
            RuleD4().check(_entity(unique=[]))
        assert exc_info.value.message == "entity 'user' must be unique on at least one property"

    def test_value_object_is_unique_on_all_properties(self, address_value_object):
        RuleD4().check(address_value_object)


class TestRuleRegistry:

    @pytest.fixture
    def registry(self):
        registry = RuleRegistry()
        registry.register_rules(DEFAULT_RULES)
        return registry

    def test_default_rules_in_order(self, registry):
        assert [r.RULE_ID for r in registry.get_enabled_rules()] == ["D1", "D2", "D3", "D4"]
        assert len(registry) == 4

    def test_register_non_rule(self, registry):
        with pytest.raises(TypeError):
            registry.register_rule(dict)

    def test_register_rule_without_metadata(self, registry):
        class Nameless(BaseDeclarationRule):
            RULE_ID = "X1"

            def check(self, entity):
                pass

        with pytest.raises(ValueError):
            registry.register_rule(Nameless)

    def test_disabled_rule_skipped(self, registry):
        registry.get_rule("D4").disable()
        registry.check_all([_entity(unique=[])])

    def test_check_all_accepts_duck_typed_entities(self, registry, duck_entity):
        registry.check_all([duck_entity])

    def test_global_config_reaches_rule(self):
        registry = RuleRegistry({"D2": {"max_length": 10}})
        registry.register_rules(DEFAULT_RULES)
        assert registry.get_rule("D2").config["max_length"] == 10
        assert registry.get_rule("D2").config["reference_suffix"] == "_id"

    def test_rule_info(self, registry):
        info = registry.get_rule("D1").get_info()
        assert info["id"] == "D1"
        assert info["class_name"] == "RuleD1"
        assert info["name"] == "Зарезервированные имена свойств"
        assert str(registry.get_rule("D1")).startswith("[✓] D1")

    def test_missing_optional_flags(self, registry):
        entity = SimpleNamespace(
            name="device",
            properties={"serial": SimpleNamespace(type="text")},
            unique=["serial"],
        )
        registry.check_entity(entity)
