from typing import Any

from schemagen.rules.base import BaseDeclarationRule
from schemagen.core.constants import RULE_IDS
from schemagen.core.exceptions import ReservedPropertyName
from schemagen.utils.naming import hash_column_name
from schemagen.utils.validators import property_flag


class RuleD1(BaseDeclarationRule):
    """
    D1: зарезервированные имена.

    Зарезервированы служебные колонки генератора и колонки хэшей
    свойств-массивов этой же сущности (<массив>_hash).
    """

    RULE_ID = "D1"
    RULE_NAME = RULE_IDS[RULE_ID]
    RULE_DESCRIPTION = (
        "Свойство не может называться так же, как служебная колонка "
        "или колонка хэша массива, которые генератор создаёт сам."
    )

    def check(self, entity: Any) -> None:
        reserved = set(self.config.get("reserved_names", []))
        reserved.update(
            hash_column_name(name)
            for name, definition in entity.properties.items()
            if property_flag(definition, "array")
        )
        for property_name in entity.properties:
            if property_name in reserved:
                raise ReservedPropertyName(entity.name, property_name)
